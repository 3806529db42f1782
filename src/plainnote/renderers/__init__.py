"""plainnote renderers.

Renderers convert a Document plus its source string into an output format.

Available Renderers:
- HtmlRenderer: Renders a Document to an HTML fragment

"""

from plainnote.renderers.html import HtmlRenderer

__all__ = ["HtmlRenderer"]
