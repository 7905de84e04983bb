"""Entry lifecycle API: the forms framework calls this after an entry is saved."""

from typing import Annotated

from fastapi import APIRouter, Depends, Path

from embedgate.api.v1.dependencies import get_embed_cache_gate
from embedgate.application.services.embed_cache_gate import EmbedCacheGate
from embedgate.domain.entities.form import FormEntity
from embedgate.schemas.entry import EntryUpdatedRequest, EntryUpdatedResponse

router = APIRouter()


@router.post("/{entry_id}/updated", response_model=EntryUpdatedResponse)
async def entry_updated(
    entry_id: Annotated[int, Path(gt=0)],
    body: EntryUpdatedRequest,
    gate: Annotated[EmbedCacheGate, Depends(get_embed_cache_gate)],
) -> EntryUpdatedResponse:
    """Clear cached embeds for every tweet field on the entry's form."""
    form = FormEntity.from_dict(body.form.model_dump())
    cleared = await gate.invalidate(form, entry_id)
    return EntryUpdatedResponse(entry_id=entry_id, form_id=form.id, keys_cleared=cleared)
