"""Label API routes."""

from fastapi import APIRouter, HTTPException

from ...models import Label
from ..store import ITracerStore


def create_labels_router(store: ITracerStore) -> APIRouter:
    """Create labels router."""
    router = APIRouter(prefix="/labels", tags=["labels"])

    @router.post("", response_model=Label)
    async def add_label(label: Label) -> Label:
        return store.add_label(label)

    @router.get("", response_model=list[Label])
    async def get_labels() -> list[Label]:
        return store.get_labels()

    @router.get("/{label_id}", response_model=Label)
    async def get_label(label_id: int) -> Label:
        label = store.get_label(label_id)
        if label is None:
            raise HTTPException(status_code=404, detail=f"Label {label_id} not found")
        return label

    return router
