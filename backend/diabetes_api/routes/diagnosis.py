"""
Diabetes Diagnosis API — Diagnosis Scoring Route
==================================================

What:  POST /api/diagnosis/process scores a symptom list.
How:   DiagnosisService computes the score synchronously. When the body
       carries a user_id, the row insert is handed to FastAPI's
       BackgroundTasks and runs after the response is sent; its failure
       is logged and never changes the response.
"""

from fastapi import APIRouter, BackgroundTasks, Depends

from diabetes_api.dependencies import get_gateway
from diabetes_api.gateway import QueryGateway
from diabetes_api.schemas.diagnosis import DiagnosisRequest, DiagnosisResult
from diabetes_api.schemas.system import ErrorResponse
from diabetes_api.services.diagnosis_service import diagnosis_service

router = APIRouter(prefix="/api/diagnosis", tags=["Diagnosis"])


@router.post(
    "/process",
    response_model=DiagnosisResult,
    responses={400: {"description": "Malformed body", "model": ErrorResponse}},
    summary="Score a symptom list",
    description=(
        "Score = number of symptoms x 20. Risk is Tinggi above 70, Sedang above 40, "
        "otherwise Rendah. The recommendation text is fixed."
    ),
)
async def process_diagnosis(
    body: DiagnosisRequest,
    background_tasks: BackgroundTasks,
    gateway: QueryGateway = Depends(get_gateway),
) -> DiagnosisResult:
    return await diagnosis_service.process_diagnosis(
        gateway,
        body.symptoms,
        user_id=body.user_id,
        defer=background_tasks.add_task,
    )
