import fastapi


async def http_404_exc_resume_not_found_request(resume_id: int) -> Exception:
    return fastapi.HTTPException(
        status_code=fastapi.status.HTTP_404_NOT_FOUND,
        detail=f"Resume with id `{resume_id}` not found",
    )


async def http_404_exc_interview_not_found_request(interview_id: int) -> Exception:
    return fastapi.HTTPException(
        status_code=fastapi.status.HTTP_404_NOT_FOUND,
        detail=f"Interview with id `{interview_id}` not found",
    )


async def http_404_exc_template_not_found_request(template_id: str) -> Exception:
    return fastapi.HTTPException(
        status_code=fastapi.status.HTTP_404_NOT_FOUND,
        detail=f"Template `{template_id}` not found",
    )
