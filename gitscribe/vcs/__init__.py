from .git import GitError, commit, read_staged_diff

__all__ = ["GitError", "commit", "read_staged_diff"]
