"""Document shapes and normalization shared by all repositories.

Stored documents keep the field names of the ``Users`` and ``TaskList``
collections:

    Users:    {_id, name, email, avatar, password}
    TaskList: {_id, title, createdAt, userIds: [ObjectId, ...]}

A freshly inserted document is known only by the driver-generated ``_id``
while some read paths surface ``id``. Every document leaving a repository
goes through ``user_from_document`` / ``task_list_from_document`` so the
rest of the code sees a single entity shape.
"""

from typing import Any, Dict, List, Optional

from bson import ObjectId
from bson.errors import InvalidId

from tasklists.domain.shared.errors import BadUserInputError
from tasklists.domain.task_list.entities import TaskList
from tasklists.domain.user.entities import User

USERS_COLLECTION = "Users"
TASK_LISTS_COLLECTION = "TaskList"


def parse_object_id(value: Any) -> Optional[ObjectId]:
    """ObjectId for ``value`` or None if it is not a valid identifier."""
    if isinstance(value, ObjectId):
        return value
    try:
        return ObjectId(str(value))
    except (InvalidId, TypeError):
        return None


def require_object_id(value: Any, field_name: str) -> ObjectId:
    """ObjectId for ``value``.

    Raises:
        BadUserInputError: If ``value`` is not a valid identifier
    """
    object_id = parse_object_id(value)
    if object_id is None:
        raise BadUserInputError(f"Invalid {field_name}: {value!r}")
    return object_id


def member_filter_values(user_id: str) -> List[Any]:
    """Values matching ``user_id`` in ``userIds`` whatever its stored form."""
    values: List[Any] = [str(user_id)]
    object_id = parse_object_id(user_id)
    if object_id is not None:
        values.insert(0, object_id)
    return values


def document_id(doc: Dict[str, Any]) -> str:
    """String form of whichever of ``_id`` / ``id`` is populated."""
    raw = doc.get("_id") or doc.get("id")
    if raw is None:
        raise ValueError("Document has neither '_id' nor 'id'")
    return str(raw)


def user_from_document(doc: Dict[str, Any]) -> User:
    """Convert a ``Users`` document to a User entity."""
    return User(
        id=document_id(doc),
        name=doc.get("name", ""),
        email=doc.get("email", ""),
        password_hash=doc.get("password", ""),
        avatar=doc.get("avatar"),
    )


def user_to_document(
    name: str, email: str, password_hash: str, avatar: Optional[str]
) -> Dict[str, Any]:
    """New ``Users`` document (without ``_id``)."""
    return {
        "name": name,
        "email": email,
        "avatar": avatar,
        "password": password_hash,
    }


def task_list_from_document(doc: Dict[str, Any]) -> TaskList:
    """Convert a ``TaskList`` document to a TaskList entity."""
    return TaskList(
        id=document_id(doc),
        title=doc.get("title", ""),
        created_at=doc.get("createdAt", ""),
        user_ids=[str(user_id) for user_id in doc.get("userIds", [])],
    )


def task_list_to_document(title: str, created_at: str, user_ids: List[str]) -> Dict[str, Any]:
    """New ``TaskList`` document (without ``_id``)."""
    return {
        "title": title,
        "createdAt": created_at,
        "userIds": [require_object_id(user_id, "userId") for user_id in user_ids],
    }
