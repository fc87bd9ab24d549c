"""Link building for source repositories."""

from srclink.links.builder import LinkBuilder, build_link
from srclink.links.normalizer import url_parts
from srclink.links.template import expand_vars

__all__ = ["LinkBuilder", "build_link", "url_parts", "expand_vars"]
