"""srclink: browsable source-control links from repository descriptors."""

from srclink.links.builder import LinkBuilder, build_link
from srclink.links.normalizer import url_parts
from srclink.links.template import expand_vars
from srclink.utils.regex import escape_regexp

__version__ = "0.1.0"

__all__ = [
    "LinkBuilder",
    "build_link",
    "url_parts",
    "expand_vars",
    "escape_regexp",
    "__version__",
]
