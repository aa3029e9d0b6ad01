from fastapi import APIRouter, UploadFile, File, HTTPException, Query

from app.core.schemas import ExtractionMode, ParseResponse, ParseTextRequest
from app.core.text_parser import parse_text_to_response
from app.core.docx_extractor import extract_docx_text
from app.core.pdf_extractor import extract_pdf_text

router = APIRouter(tags=["parse"])

DOCX_CONTENT_TYPES = {"application/vnd.openxmlformats-officedocument.wordprocessingml.document"}
TEXT_CONTENT_TYPES = {"text/plain", "text/markdown"}


@router.post(
    "/parse",
    response_model=ParseResponse,
    summary="Parse Resume File",
    description="Convert a resume file (DOCX, PDF, or TXT) to text and extract a structured, sparse resume record.",
    responses={
        200: {
            "description": "Successfully parsed resume",
            "content": {
                "application/json": {
                    "example": {
                        "resume": {
                            "name": "Jane Doe",
                            "email": "jane@example.com",
                            "jobRole": ["Software Engineer"],
                            "workExperience": [
                                {
                                    "company": "Tech Corp",
                                    "position": "Software Engineer",
                                    "startDate": "2023-01-01",
                                    "endDate": "Present",
                                    "description": ["Built the billing service"]
                                }
                            ],
                            "skills": ["Python", "FastAPI"]
                        },
                        "mode": "strict",
                        "sections": [
                            {"section_type": "experience", "header_text": "EXPERIENCE", "locator": "text:line:4", "line_count": 4}
                        ],
                        "parse_quality": "medium",
                        "warnings": []
                    }
                }
            }
        },
        400: {"description": "Empty file uploaded"},
        415: {"description": "Unsupported file format"},
        422: {"description": "File has no extractable text"}
    }
)
async def parse_resume_file(
    file: UploadFile = File(..., description="Resume file (DOCX, PDF, or TXT format)"),
    mode: ExtractionMode = Query("strict", description="strict, loose, or auto (best of both)"),
):
    """
    Parse a resume file and extract a structured record.

    **Supported formats:**
    - DOCX (.docx)
    - PDF (.pdf) - Text-layer extraction only, OCR not supported
    - TXT / MD (.txt, .md)
    """
    raw = await file.read()
    if not raw:
        raise HTTPException(status_code=400, detail="Empty file uploaded.")

    filename = (file.filename or "").lower()
    content_type = (file.content_type or "").lower()

    if filename.endswith(".docx") or content_type in DOCX_CONTENT_TYPES:
        text = extract_docx_text(raw)
    elif filename.endswith(".pdf") or content_type == "application/pdf":
        text = extract_pdf_text(raw)
    elif content_type in TEXT_CONTENT_TYPES or filename.endswith((".txt", ".md")):
        text = raw.decode("utf-8", errors="replace")
    else:
        raise HTTPException(status_code=415, detail=f"Unsupported content type for now: {file.content_type}")

    if not text.strip():
        raise HTTPException(
            status_code=422,
            detail="Document appears to have no extractable text. OCR is not supported."
        )
    return parse_text_to_response(text, mode=mode)


@router.post(
    "/parse/text",
    response_model=ParseResponse,
    summary="Parse Resume Text",
    description="Extract a structured, sparse resume record from already-extracted plain text.",
    responses={400: {"description": "Blank text"}},
)
def parse_resume_text(request: ParseTextRequest):
    if not request.text.strip():
        raise HTTPException(status_code=400, detail="Resume text is blank.")
    return parse_text_to_response(request.text, mode=request.mode)
