"""
Diabetes Diagnosis API — Diagnosis Service
============================================

What:  Scores a submitted symptom list and, when a user is given, records
       the result.
How:   Scoring is synchronous and pure (see `scoring`). Persistence is a
       separate best-effort side write owned by `DiagnosisRecorder`.

Flow (POST /api/diagnosis/process):
    ┌──────────┐    ┌──────────────┐    ┌──────────────────────┐
    │ Symptoms │───▶│ Score + Risk │───▶│ Response to client   │
    └──────────┘    └──────┬───────┘    └──────────────────────┘
                           │ user_id present
                           ▼
                    ┌──────────────────┐
                    │ DiagnosisRecorder│  (background task, errors logged)
                    └──────────────────┘

Score and insert are not one transaction. If the insert fails, or the
process dies before it runs, the client still gets its score and the row
is lost.
"""

import json
import logging
from typing import Any, Callable, Optional, Sequence

from sqlalchemy import insert

from diabetes_api.exceptions import DatabaseError
from diabetes_api.gateway import QueryGateway, WriteResult
from diabetes_api.models import Diagnosis
from diabetes_api.schemas.diagnosis import DiagnosisResult
from diabetes_api.services.scoring import DEFAULT_RECOMMENDATION, compute_score, risk_level

logger = logging.getLogger(__name__)

# Signature of BackgroundTasks.add_task: (func, *args)
Defer = Callable[..., Any]


class DiagnosisRecorder:
    """
    Best-effort writer for diagnosis rows.

    `record()` never raises for database failures; it logs them and
    returns None. A missing user (foreign key violation) is one such
    failure.
    """

    async def record(
        self,
        gateway: QueryGateway,
        user_id: int,
        result: DiagnosisResult,
        symptoms: Sequence[Any],
    ) -> Optional[WriteResult]:
        statement = insert(Diagnosis.__table__).values(
            user_id=user_id,
            skor_akhir=result.skor_akhir,
            tingkat_risiko=result.tingkat_risiko,
            gejala_terpilih=json.dumps(list(symptoms)),
        )
        try:
            written = await gateway.execute(statement)
        except DatabaseError as e:
            logger.warning(
                "Diagnosis for user %s not saved (score=%s): %s",
                user_id,
                result.skor_akhir,
                e.detail or e.message,
            )
            return None

        logger.info(
            "Diagnosis %s saved for user %s (%s, %s)",
            written.insert_id,
            user_id,
            result.skor_akhir,
            result.tingkat_risiko,
        )
        return written


class DiagnosisService:

    def __init__(self, recorder: Optional[DiagnosisRecorder] = None):
        self.recorder = recorder or DiagnosisRecorder()

    def evaluate(self, symptoms: Sequence[Any]) -> DiagnosisResult:
        score = compute_score(symptoms)
        return DiagnosisResult(
            skor_akhir=score,
            tingkat_risiko=risk_level(score),
            rekomendasi=DEFAULT_RECOMMENDATION,
        )

    async def process_diagnosis(
        self,
        gateway: QueryGateway,
        symptoms: Sequence[Any],
        user_id: Optional[int] = None,
        defer: Optional[Defer] = None,
    ) -> DiagnosisResult:
        """
        Score `symptoms` and persist the result for `user_id` if given.

        Args:
            gateway:  Query gateway used by the side write
            symptoms: Submitted symptom identifiers; only the count is scored
            user_id:  Owner of the diagnosis row; None skips persistence
            defer:    Scheduler for the side write (the route passes
                      `BackgroundTasks.add_task`). Without one the write is
                      awaited inline, still best-effort.
        """
        result = self.evaluate(symptoms)
        logger.info(
            "Diagnosis scored: %d symptoms -> %s (%s)",
            len(symptoms),
            result.skor_akhir,
            result.tingkat_risiko,
        )

        if user_id is not None:
            if defer is not None:
                defer(self.recorder.record, gateway, user_id, result, list(symptoms))
            else:
                await self.recorder.record(gateway, user_id, result, symptoms)

        return result


diagnosis_service = DiagnosisService()
