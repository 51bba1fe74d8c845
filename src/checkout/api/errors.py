"""Translate domain failures into HTTP errors."""

from contextlib import contextmanager

from fastapi import HTTPException
from protean.exceptions import ObjectNotFoundError, ValidationError

from checkout.placement.errors import BasketNotFound, InsufficientFunds


@contextmanager
def domain_errors():
    try:
        yield
    except BasketNotFound as exc:
        raise HTTPException(status_code=404, detail=exc.messages) from exc
    except InsufficientFunds as exc:
        raise HTTPException(status_code=402, detail=exc.messages) from exc
    except ObjectNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    except ValidationError as exc:
        raise HTTPException(status_code=422, detail=exc.messages) from exc
