from typing import List
from fastapi import APIRouter, Depends
from ..schemas import EmployeeCreate, EmployeeRecord
from ..store import RecordStore, get_store

router = APIRouter()

@router.get("", response_model=List[EmployeeRecord])
async def list_records(store: RecordStore = Depends(get_store)):
    return await store.list_all()

@router.post("", response_model=EmployeeRecord, status_code=201)
async def create_record(payload: EmployeeCreate, store: RecordStore = Depends(get_store)):
    return await store.insert(payload.to_record())
