from fastapi import APIRouter, Depends, Response
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import HTMLResponse
from ..certificate import render_certificate_html, render_certificate_pdf
from ..schemas import CertificateData
from ..store import RecordStore, get_store

router = APIRouter()

@router.get("/{educator_id}", response_model=CertificateData)
async def get_certificate_data(educator_id: str, store: RecordStore = Depends(get_store)):
    return await store.fetch_one(educator_id)

@router.get("/{educator_id}/html", response_class=HTMLResponse)
async def preview_certificate(educator_id: str, store: RecordStore = Depends(get_store)):
    data = await store.fetch_one(educator_id)
    return HTMLResponse(render_certificate_html(data))

@router.get("/{educator_id}/pdf")
async def download_certificate(educator_id: str, store: RecordStore = Depends(get_store)):
    data = await store.fetch_one(educator_id)
    pdf_bytes = await run_in_threadpool(render_certificate_pdf, data)
    return Response(
        content=pdf_bytes,
        media_type="application/pdf",
        headers={"Content-Disposition": f'attachment; filename="no-dues-{educator_id}.pdf"'},
    )
