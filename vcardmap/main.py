import io
import logging

from fastapi import FastAPI, HTTPException, UploadFile
from fastapi.responses import StreamingResponse
from vobject.base import ParseError

from .config import get_settings
from .logging_config import setup_logging
from .models import ContactRecord
from .vcards import parse_vcards, record_to_dict, records_to_vcards30

settings = get_settings()
setup_logging(settings.log_level)
logger = logging.getLogger(__name__)

app = FastAPI(title="vcardmap")


async def _read_records(file: UploadFile) -> list[ContactRecord]:
    data = await file.read()
    if len(data) > settings.max_upload_bytes:
        raise HTTPException(status_code=413, detail="Upload too large")
    try:
        records = parse_vcards(data.decode(errors="ignore"))
    except ParseError as exc:
        raise HTTPException(status_code=400, detail=f"Unreadable vCard data: {exc}") from exc
    if settings.default_product_id:
        for record in records:
            if not record.product_id:
                record.product_id = settings.default_product_id
    logger.info("Decoded %d contact(s) from %s", len(records), file.filename or "upload")
    return records


@app.get("/health")
async def health():
    return {"status": "ok"}


@app.post("/upload")
async def upload(file: UploadFile):
    records = await _read_records(file)
    vcf_text = records_to_vcards30(records, fold_width=settings.fold_width)
    # Derive download filename from uploaded file
    base = (file.filename or "contacts").rsplit("/", 1)[-1].rsplit("\\", 1)[-1]
    if base.lower().endswith('.vcf'):
        base = base[:-4]
    out_name = f"{base}-3.0.vcf"
    return StreamingResponse(
        io.BytesIO(vcf_text.encode("utf-8")),
        media_type="text/vcard; charset=utf-8",
        headers={"Content-Disposition": f"attachment; filename={out_name}"},
    )


@app.post("/parse")
async def parse(file: UploadFile):
    records = await _read_records(file)
    return {"count": len(records), "contacts": [record_to_dict(r) for r in records]}
