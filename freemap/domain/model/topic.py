"""Topic entity for grouping places."""

from pydantic import Field

from freemap.domain.model.common import DomainModel
from freemap.domain.value import TopicId


class Topic(DomainModel):
    """Topic entity.

    Topics are created by users and group places under a shared theme,
    e.g. "wheelchair accessible shops". They are never renamed or deleted.
    """

    id: TopicId
    name: str = Field(min_length=1)
