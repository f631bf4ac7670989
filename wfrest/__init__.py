"""HTTP verbs, aspect hooks and URL, query, path, file and string helpers."""

__version__ = "0.9.7"

__all__ = ["aop", "codeutil", "fileutil", "pathutil", "strutil", "uriutil", "verb"]