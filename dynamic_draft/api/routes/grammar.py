import fastapi

from dynamic_draft.editor.paths import FieldPath
from dynamic_draft.models.schemas.grammar import GrammarCheckRequest, GrammarCheckResponse
from dynamic_draft.services.grammar import collect_suggestions
from dynamic_draft.services.language_tool import LanguageToolClient
from dynamic_draft.utilities.exceptions.editor import InvalidFieldPath

router = fastapi.APIRouter(prefix="", tags=["grammar"])


def get_language_tool_client() -> LanguageToolClient:
    return LanguageToolClient()


@router.post(
    path="/grammar/check",
    name="grammar:check",
    response_model=GrammarCheckResponse,
    status_code=fastapi.status.HTTP_200_OK,
    summary="Check one resume field",
    description=(
        "Runs the local grammar rules on the text and, with useRemote, the LanguageTool service as well. "
        "Suggestions that flag well-known resume terms are dropped. An unreachable grammar service yields "
        "the local suggestions only."
    ),
)
async def check_grammar(
    payload: GrammarCheckRequest,
    language_tool: LanguageToolClient = fastapi.Depends(get_language_tool_client),
) -> GrammarCheckResponse:
    try:
        field_path = str(FieldPath.parse(payload.field_path))
    except InvalidFieldPath as e:
        raise fastapi.HTTPException(status_code=fastapi.status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(e))

    remote = language_tool if payload.use_remote else None
    suggestions = await collect_suggestions(field_path, payload.text, remote)
    return GrammarCheckResponse(field_path=field_path, suggestions=suggestions)
