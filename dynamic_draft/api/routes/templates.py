import fastapi

from dynamic_draft.models.schemas.resume import ResumeDocument, TemplateSummary
from dynamic_draft.services.templates import default_document, document_from_template, get_template, list_templates
from dynamic_draft.utilities.exceptions.http.exc_404 import http_404_exc_template_not_found_request

router = fastapi.APIRouter(prefix="", tags=["templates"])


@router.get(
    path="/templates",
    name="templates:list",
    response_model=list[TemplateSummary],
    status_code=fastapi.status.HTTP_200_OK,
    summary="List starter templates",
)
async def get_templates() -> list[TemplateSummary]:
    return [TemplateSummary(**template) for template in list_templates()]


@router.get(
    path="/templates/default",
    name="templates:default",
    response_model=ResumeDocument,
    status_code=fastapi.status.HTTP_200_OK,
    summary="Blank resume document",
)
async def get_default_document() -> ResumeDocument:
    return default_document()


@router.get(
    path="/templates/{template_id}",
    name="templates:detail",
    response_model=ResumeDocument,
    status_code=fastapi.status.HTTP_200_OK,
    summary="Resume document built from a template",
    description="Returns the template's content adapted to the resume document shape, ready to load into the editor.",
)
async def get_template_document(template_id: str) -> ResumeDocument:
    template = get_template(template_id)
    if template is None:
        raise await http_404_exc_template_not_found_request(template_id=template_id)
    return document_from_template(template)
