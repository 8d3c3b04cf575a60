"""
Authors Router

List, detail, create, update and delete pages for authors.
Follows the same patterns as the genres router.
"""

from fastapi import APIRouter, Response

from catalog.dependencies import Authors, FormFields
from catalog.exceptions import NotFoundError
from catalog.services.presentation import (
    present_deleted,
    present_saved,
    redirect,
    render,
)

router = APIRouter(
    prefix="/catalog",
    tags=["Authors"],
    responses={
        404: {"description": "Author not found"},
    },
)


@router.get("/authors", summary="List all authors")
async def author_list(authors: Authors) -> Response:
    """List all authors, sorted by family name."""
    return render("author_list", title="Author List", author_list=await authors.list())


@router.get("/author/create", summary="Author create form")
async def author_create_get(authors: Authors) -> Response:
    form = await authors.create_form()
    return render("author_form", title="Create Author", **form.context)


@router.post("/author/create", summary="Create an author")
async def author_create_post(form: FormFields, authors: Authors) -> Response:
    outcome = await authors.create(form)
    return present_saved(outcome, view="author_form", title="Create Author", record_key="author")


@router.get(
    "/author/{author_id:int}",
    summary="Get an author",
    description="An author and the books they wrote.",
)
async def author_detail(author_id: int, authors: Authors) -> Response:
    detail = await authors.detail(author_id)
    return render(
        "author_detail",
        title="Author Detail",
        author=detail.record,
        author_books=detail.dependents,
    )


@router.get("/author/{author_id:int}/delete", summary="Author delete confirmation")
async def author_delete_get(author_id: int, authors: Authors) -> Response:
    try:
        detail = await authors.delete_form(author_id)
    except NotFoundError:
        return redirect("/catalog/authors")
    return render(
        "author_delete",
        title="Delete Author",
        author=detail.record,
        author_books=detail.dependents,
    )


@router.post(
    "/author/{author_id:int}/delete",
    summary="Delete an author",
    description="Delete an author unless books still name them.",
)
async def author_delete_post(author_id: int, authors: Authors) -> Response:
    outcome = await authors.delete(author_id)
    return present_deleted(
        outcome,
        view="author_delete",
        title="Delete Author",
        record_key="author",
        dependents_key="author_books",
        list_url="/catalog/authors",
    )


@router.get("/author/{author_id:int}/update", summary="Author update form")
async def author_update_get(author_id: int, authors: Authors) -> Response:
    form = await authors.update_form(author_id)
    return render("author_form", title="Update Author", author=form.record, **form.context)


@router.post("/author/{author_id:int}/update", summary="Update an author")
async def author_update_post(author_id: int, form: FormFields, authors: Authors) -> Response:
    outcome = await authors.update(author_id, form)
    return present_saved(outcome, view="author_form", title="Update Author", record_key="author")
