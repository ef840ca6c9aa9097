"""Screen modules; importing this package registers every screen."""
from . import post_detail, user_detail, users  # noqa: F401
