"""
Catalog Home Router

The landing page: how many records of each kind the library holds.
"""

from fastapi import APIRouter, Response

from catalog.dependencies import Store
from catalog.services.presentation import render
from catalog.services.summary import catalog_summary

router = APIRouter(
    prefix="/catalog",
    tags=["Catalog"],
)


@router.get(
    "/",
    summary="Catalog home",
    description="Counts of books, copies (all and available), authors and genres.",
)
async def index(store: Store) -> Response:
    counts = await catalog_summary(store)
    return render("index", title="Local Library Home", **counts)
