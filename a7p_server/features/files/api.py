import logging

from fastapi import APIRouter, HTTPException, Request, Response

from a7p_server.domain.errors import InvalidFilename, ProfileFileError, ProfileNotFound, TextParseError
from a7p_server.features.files.schemas import StoreRequest
from a7p_server.features.files.service import ProfileFilesService

logger = logging.getLogger(__name__)

router = APIRouter(tags=["files"])


def _service(request: Request) -> ProfileFilesService:
    return ProfileFilesService(files_dir=request.app.state.cfg.files_dir)


def _http_error(e: ProfileFileError) -> HTTPException:
    if isinstance(e, ProfileNotFound):
        status = 404
    elif isinstance(e, (InvalidFilename, TextParseError)):
        status = 400
    else:
        # Checksum and binary failures mean the stored file itself is bad.
        status = 500
    logger.warning("%s error: %s", e.stage.value, e.message)
    return HTTPException(status_code=status, detail=e.code)


@router.get("/filelist")
def list_files(request: Request) -> list[str]:
    return _service(request).list_files()


@router.get("/files")
def get_file(request: Request, filename: str = "") -> Response:
    try:
        text = _service(request).load(filename=filename)
    except ProfileFileError as e:
        raise _http_error(e) from e
    return Response(content=text, media_type="application/json")


@router.put("/files")
def put_file(request: Request, body: StoreRequest, filename: str = "") -> dict[str, str]:
    try:
        _service(request).store_tree(filename=filename, tree=body.content)
    except ProfileFileError as e:
        raise _http_error(e) from e
    return {"status": "ok"}


@router.delete("/files")
def delete_file(request: Request, filename: str = "") -> dict[str, str]:
    try:
        _service(request).delete(filename=filename)
    except ProfileFileError as e:
        raise _http_error(e) from e
    return {"status": "ok"}
