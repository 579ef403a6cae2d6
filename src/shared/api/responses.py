"""Success envelope used by every JSON endpoint."""

from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse


def envelope(data=None, message="OK", code=200, meta=None) -> JSONResponse:
    content = {"status": "success", "message": message, "code": code, "data": data}
    if meta is not None:
        content["meta"] = meta
    return JSONResponse(status_code=code, content=jsonable_encoder(content))
