"""Static site generation around the plainnote compiler.

Provides:
- notes: note discovery and filename-derived titles/links
- metadata: the creation-timestamp store
- templates: jinja2 page templates
- build: the build pipeline (build_site)
- config: plainnote.toml loading
"""

from plainnote.site.build import BuildReport, build_site
from plainnote.site.config import SiteConfig, load_site_config

__all__ = [
    "BuildReport",
    "SiteConfig",
    "build_site",
    "load_site_config",
]
