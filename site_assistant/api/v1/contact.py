from fastapi import APIRouter, Depends, HTTPException

from site_assistant.api.v1.schemas import ContactRequestSchema, ContactResponseSchema
from site_assistant.application.use_cases.submit_contact import SubmitContactUseCase
from site_assistant.domain.entities.contact import ContactRequest
from site_assistant.wiring.dependencies import get_contact_use_case

router = APIRouter()


@router.post("/contact", response_model=ContactResponseSchema)
def submit_contact(
    req: ContactRequestSchema,
    uc: SubmitContactUseCase = Depends(get_contact_use_case),
):
    try:
        result = uc.execute(ContactRequest(email=req.email, name=req.name, language=req.language))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    if not result.success:
        raise HTTPException(status_code=502, detail=result.message)
    return ContactResponseSchema(success=True, message=result.message, internal_id=result.internal_id)
