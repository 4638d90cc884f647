"""Request DTOs for API endpoints."""

from pydantic import BaseModel, Field

from neologism_cache.entities import NeologismDraft, NeologismStatus


class CreateNeologismRequest(BaseModel):
    """Request DTO for creating a neologism.

    The handler converts this to a NeologismDraft; there is deliberately no
    id, created_at or category field.
    """

    name: str = Field(..., description="The invented word", min_length=1)
    definition: str = Field(..., description="What the word means", min_length=1)
    root_words: list[str] = Field(default_factory=list, description="Words it is built from")
    category_id: str | None = Field(None, description="Category to file the word under")
    image_url: str | None = Field(None, description="Optional illustration URL")
    status: str = Field(NeologismStatus.DRAFT.value, description="Initial workflow state")

    def to_draft(self) -> NeologismDraft:
        return NeologismDraft(
            name=self.name,
            definition=self.definition,
            root_words=tuple(self.root_words),
            category_id=self.category_id,
            image_url=self.image_url,
            status=self.status,
        )


class UpdateNeologismRequest(BaseModel):
    """Request DTO for editing the content of a neologism."""

    name: str = Field(..., min_length=1)
    definition: str = Field(..., min_length=1)
    root_words: list[str] = Field(default_factory=list)
    category_id: str | None = None
    image_url: str | None = None
    status: str = Field(..., min_length=1)


class StatusUpdateRequest(BaseModel):
    """Request DTO for moving a neologism to another workflow state."""

    status: str = Field(..., description="New workflow state", min_length=1)


class CreateCategoryRequest(BaseModel):
    """Request DTO for creating a category."""

    name: str = Field(..., description="Category name", min_length=1)


class LoginRequest(BaseModel):
    """Request DTO for password sign-in."""

    email: str = Field(..., min_length=3)
    password: str = Field(..., min_length=1)
