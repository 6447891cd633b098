"""relgit - Git remotes and release commits for hosted platform apps."""

__version__ = '0.1.0'
