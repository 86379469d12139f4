from .user import User, Address, Geo, Company
from .post import Post
from .patches import UserPatch, PostPatch

__all__ = ["User", "Address", "Geo", "Company", "Post", "UserPatch", "PostPatch"]
