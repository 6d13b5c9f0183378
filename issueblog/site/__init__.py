"""Static site generation for issue blogs.

Turns a repository's issues into:
- One page per published issue
- An index page and one index page per label
- An Atom feed
- Any extra pages the theme declares
"""

from issueblog.site.builder import BuildResult, SiteBuilder

__all__ = ["BuildResult", "SiteBuilder"]
