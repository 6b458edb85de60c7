from .git_http import GitHttpClient

__all__ = ["GitHttpClient"]
