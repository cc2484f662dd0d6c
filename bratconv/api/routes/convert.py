import logging

from fastapi import APIRouter, HTTPException

from bratconv.core.config import settings
from bratconv.core.errors import (
    ConfigurationError,
    FormatError,
    RangeError,
    ResourceError,
    UnsupportedFeature,
)
from bratconv.models.convert import ConvertRequest, ConvertResponse, DocumentOut
from bratconv.services.conversion.pipeline import convert_texts

logger = logging.getLogger(__name__)

router = APIRouter(tags=["conversion"])


@router.post("/convert", response_model=ConvertResponse)
def convert(req: ConvertRequest) -> ConvertResponse:
    """
    Convert in-memory annotation.conf + (.ann, .txt) pairs.
    Returns the Acharya stream plus per-document records and stand-off blocks.
    All-or-nothing: the first failing document fails the request.
    """
    if not req.documents:
        raise HTTPException(status_code=400, detail="No documents provided.")

    if len(req.documents) > settings.MAX_DOCUMENTS_PER_REQUEST:
        raise HTTPException(
            status_code=400,
            detail=f"Too many documents. Max allowed: {settings.MAX_DOCUMENTS_PER_REQUEST}.",
        )

    try:
        result = convert_texts(
            req.conf,
            ((d.id, d.ann, d.txt, d.test) for d in req.documents),
        )
    except (ConfigurationError, ResourceError) as e:
        raise HTTPException(status_code=400, detail=str(e))
    except (FormatError, UnsupportedFeature, RangeError) as e:
        logger.info("Conversion rejected: %s", e)
        raise HTTPException(status_code=422, detail=str(e))

    return ConvertResponse(
        acharya=result.acharya,
        documents=[
            DocumentOut(
                id=d.doc_id,
                test=d.is_test,
                acharya=d.acharya,
                standoff=d.standoff,
                entity_count=d.entity_count,
                relation_count=d.relation_count,
            )
            for d in result.documents
        ],
    )
