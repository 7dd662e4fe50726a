"""issuelink — resolve issue IDs into issue tracker URLs."""

__version__ = "0.3.0"
