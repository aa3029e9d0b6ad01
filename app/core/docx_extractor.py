from io import BytesIO

from docx import Document


def extract_docx_text(docx_bytes: bytes) -> str:
    """
    Deterministically extract paragraph text from a DOCX, one paragraph per line.
    Table cells are appended after the body paragraphs, one cell per line.
    """
    doc = Document(BytesIO(docx_bytes))
    out = [(p.text or "").strip() for p in doc.paragraphs]
    for table in doc.tables:
        for row in table.rows:
            for cell in row.cells:
                out.append((cell.text or "").strip())
    return "\n".join(t for t in out if t)
