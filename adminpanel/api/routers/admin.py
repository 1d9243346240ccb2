"""Admin API endpoints for editing registered models."""

from typing import Any, Mapping

from fastapi import APIRouter, Depends, HTTPException, Query, Request

from adminpanel.admin.base import AbstractAdmin
from adminpanel.admin.pool import AdminPool
from adminpanel.admin.request import AdminRequest
from adminpanel.api.dependencies import get_admin_pool, get_request_admin
from adminpanel.api.schemas import AdminList, EditForm
from adminpanel.errors import ModelManagerError
from adminpanel.form.form import Form
from adminpanel.logging_utils import get_logger
from adminpanel.utils.optimistic_lock import ConflictError

logger = get_logger(__name__)
router = APIRouter(prefix="/admin", tags=["admin"])

LOCK_CONFLICT_MESSAGE = (
    "The record was modified by another user while you were editing it. "
    "Reload the form to get the latest version before saving again."
)


def _load_object(admin: AbstractAdmin, object_id: str) -> Any:
    obj = admin.get_object(object_id)
    if obj is None:
        raise HTTPException(status_code=404, detail=f"Object '{object_id}' not found")
    return obj


def _render(admin: AbstractAdmin, object_id: str, form: Form) -> EditForm:
    return EditForm(
        admin=admin.get_code(),
        object_id=object_id,
        uniqid=admin.get_uniqid(),
        fields=form.to_dict()["fields"],
    )


@router.get("/", response_model=AdminList)
def list_admins(pool: AdminPool = Depends(get_admin_pool)) -> AdminList:
    """List registered admin codes."""
    return AdminList(admins=pool.codes())


@router.get("/{code}/{object_id}/edit", response_model=EditForm)
def edit_form(
    object_id: str,
    admin: AbstractAdmin = Depends(get_request_admin),
) -> EditForm:
    """Render the edit form, including the lock version when the model is versioned."""
    obj = _load_object(admin, object_id)
    return _render(admin, object_id, admin.get_form(obj))


@router.post("/{code}/{object_id}/edit", response_model=EditForm)
async def submit_edit_form(
    object_id: str,
    request: Request,
    uniqid: str = Query(..., min_length=1, description="uniqid returned with the rendered form"),
    admin: AbstractAdmin = Depends(get_request_admin),
) -> EditForm:
    """
    Save an edit form.

    Inputs are posted as ``<uniqid>[<field>]=<value>``. If the object was
    saved by someone else since the form was rendered, the request fails with
    HTTP 409 and nothing is written.
    """
    admin_request = await AdminRequest.from_starlette(request)
    admin.set_uniqid(uniqid)
    admin.set_request(admin_request)

    obj = _load_object(admin, object_id)
    submitted = admin_request.get(uniqid, {})
    if not isinstance(submitted, Mapping):
        raise HTTPException(status_code=422, detail=f"Expected fields posted as {uniqid}[<field>]")

    form = admin.get_form(obj)
    form.submit(submitted)
    if not form.is_valid():
        raise HTTPException(status_code=422, detail=form.errors)

    try:
        admin.update(obj)
    except ConflictError as e:
        logger.warning("[ADMIN][LOCK] %s", e)
        raise HTTPException(status_code=409, detail=LOCK_CONFLICT_MESSAGE)
    except ModelManagerError as e:
        logger.error("[ADMIN] Failed to save %s %s: %s", admin.get_code(), object_id, e)
        raise HTTPException(status_code=500, detail="Failed to save object")

    return _render(admin, object_id, admin.get_form(obj))
