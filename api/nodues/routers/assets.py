from enum import Enum
from fastapi import APIRouter, Depends, File, UploadFile
from ..schemas import Assets, AssetsUpdate
from ..store import RecordStore, get_store
from ..utils import bytes_to_data_url

router = APIRouter()


class AssetKind(str, Enum):
    logo = "logo"
    stamp = "stamp"
    watermark = "watermark"
    signature = "signature"


@router.get("", response_model=Assets)
async def get_assets(store: RecordStore = Depends(get_store)):
    return await store.get_assets()

@router.patch("", response_model=Assets)
async def update_assets(payload: AssetsUpdate, store: RecordStore = Depends(get_store)):
    return await store.update_assets(payload)

@router.post("/{kind}", response_model=Assets)
async def upload_asset(
    kind: AssetKind,
    file: UploadFile = File(...),
    store: RecordStore = Depends(get_store),
):
    data = await file.read()
    data_url = bytes_to_data_url(data, content_type=file.content_type or "application/octet-stream")
    partial = AssetsUpdate(**{f"{kind.value}_url": data_url})
    return await store.update_assets(partial)
