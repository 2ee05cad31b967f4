from enum import Enum
from typing import Any, Optional, List, Union
from pydantic import BaseModel, Field


class Node(BaseModel):
    id: str

class Role(str, Enum):
    ADMIN = 'ADMIN'
    MEMBER = 'MEMBER'

class User(Node):
    id: str
    first_name: str
    role: Optional['Role']
    friends: List['User']
    copy_: Optional[str] = Field(None, alias='copy')

class Post(Node):
    id: str
    author: 'User'
    tags: Optional[List[Optional[str]]]
    published_at: Any

SearchResult = Union[User, Post]

class NewPost(BaseModel):
    title: str
    tag_ids: Optional[List[str]]
