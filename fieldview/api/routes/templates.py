"""
API routes for field detection and template rendering.
"""

from typing import Any, Optional

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, Field

from ...configuration import TemplateConfiguration, get_template_configuration
from ...detection import FieldDescriptor, TemplateKind, TemplateSuggestion, create_suggestion, suggest_templates
from ...templates import create_definition, field_accessor
from ...templates.registry import KIND_DESCRIPTIONS, PRIMARY_BINDINGS


router = APIRouter(prefix="/templates", tags=["templates"])


class KindSummary(BaseModel):
    """Summary of a renderable template kind."""
    kind: TemplateKind
    description: str
    primary_binding: str


class SuggestRequest(BaseModel):
    """Request to classify several fields at once."""
    fields: list[FieldDescriptor]


class SuggestResponse(BaseModel):
    """Suggestions ordered by confidence, highest first."""
    suggestions: list[TemplateSuggestion]
    auto_apply: list[str] = Field(description="Field names whose suggestion clears the auto-apply threshold")


class RenderRequest(BaseModel):
    """Request to render items with one template definition."""
    kind: TemplateKind
    bindings: dict[str, str] = Field(
        default_factory=dict,
        description="Accessor name -> dotted field path in each item (e.g. {'value': 'order.total'})",
    )
    options: dict[str, Any] = Field(
        default_factory=dict, description="Static template options (variant, size, type, ...)"
    )
    items: list[Optional[dict[str, Any]]]


class RenderResponse(BaseModel):
    """Rendered node trees, one per item (null for null items)."""
    kind: TemplateKind
    nodes: list[Optional[dict[str, Any]]]


@router.get("/kinds", response_model=list[KindSummary])
async def list_kinds():
    """List the template kinds that can be rendered."""
    return [
        KindSummary(kind=kind, description=description, primary_binding=PRIMARY_BINDINGS[kind])
        for kind, description in KIND_DESCRIPTIONS.items()
    ]


@router.get("/configuration", response_model=TemplateConfiguration)
async def get_configuration():
    """Get the installed template configuration."""
    return get_template_configuration()


@router.post("/classify", response_model=TemplateSuggestion)
async def classify_field(field: FieldDescriptor):
    """Suggest a template for a single field."""
    return create_suggestion(field)


@router.post("/suggest", response_model=SuggestResponse)
async def suggest_fields(request: SuggestRequest):
    """Suggest templates for several fields, highest confidence first."""
    suggestions = suggest_templates(request.fields)
    return SuggestResponse(
        suggestions=suggestions,
        auto_apply=[suggestion.field_name for suggestion in suggestions if suggestion.auto_apply],
    )


@router.post("/render", response_model=RenderResponse)
async def render_items(request: RenderRequest):
    """Render items with a template built from field-path bindings."""
    if request.kind == TemplateKind.NONE:
        raise HTTPException(status_code=400, detail="Kind 'none' has no template")

    accessors = {name: field_accessor(path) for name, path in request.bindings.items()}
    try:
        definition = create_definition(request.kind, **accessors, **request.options)
    except (TypeError, ValueError) as e:
        raise HTTPException(status_code=400, detail=f"Invalid template definition: {e}")

    nodes = []
    for item in request.items:
        node = definition.render(item)
        nodes.append(node.model_dump() if node is not None else None)
    return RenderResponse(kind=request.kind, nodes=nodes)
