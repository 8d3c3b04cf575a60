"""
Books Router

List, detail, create, update and delete pages for books.

Book forms submit the author as a single id and the genres as a
repeated "genre" field (one per ticked checkbox).
"""

from fastapi import APIRouter, Response

from catalog.dependencies import Books, FormFields
from catalog.exceptions import NotFoundError
from catalog.services.presentation import (
    present_deleted,
    present_saved,
    redirect,
    render,
)

router = APIRouter(
    prefix="/catalog",
    tags=["Books"],
    responses={
        404: {"description": "Book not found"},
    },
)


@router.get("/books", summary="List all books")
async def book_list(books: Books) -> Response:
    """List all books, sorted by title."""
    return render("book_list", title="Book List", book_list=await books.list())


@router.get(
    "/book/create",
    summary="Book create form",
    description="Empty book form with the authors and genres to choose from.",
)
async def book_create_get(books: Books) -> Response:
    form = await books.create_form()
    return render("book_form", title="Create Book", **form.context)


@router.post("/book/create", summary="Create a book")
async def book_create_post(form: FormFields, books: Books) -> Response:
    outcome = await books.create(form)
    return present_saved(outcome, view="book_form", title="Create Book", record_key="book")


@router.get(
    "/book/{book_id:int}",
    summary="Get a book",
    description="A book and all of its copies.",
)
async def book_detail(book_id: int, books: Books) -> Response:
    detail = await books.detail(book_id)
    return render(
        "book_detail",
        title="Book Detail",
        book=detail.record,
        book_instances=detail.dependents,
    )


@router.get("/book/{book_id:int}/delete", summary="Book delete confirmation")
async def book_delete_get(book_id: int, books: Books) -> Response:
    try:
        detail = await books.delete_form(book_id)
    except NotFoundError:
        return redirect("/catalog/books")
    return render(
        "book_delete",
        title="Delete Book",
        book=detail.record,
        book_instances=detail.dependents,
    )


@router.post(
    "/book/{book_id:int}/delete",
    summary="Delete a book",
    description="Delete a book unless copies of it still exist.",
)
async def book_delete_post(book_id: int, books: Books) -> Response:
    outcome = await books.delete(book_id)
    return present_deleted(
        outcome,
        view="book_delete",
        title="Delete Book",
        record_key="book",
        dependents_key="book_instances",
        list_url="/catalog/books",
    )


@router.get("/book/{book_id:int}/update", summary="Book update form")
async def book_update_get(book_id: int, books: Books) -> Response:
    form = await books.update_form(book_id)
    return render("book_form", title="Update Book", book=form.record, **form.context)


@router.post("/book/{book_id:int}/update", summary="Update a book")
async def book_update_post(book_id: int, form: FormFields, books: Books) -> Response:
    outcome = await books.update(book_id, form)
    return present_saved(outcome, view="book_form", title="Update Book", record_key="book")
