"""
Book Instances Router

Pages for individual copies of books. Copies have no dependents, so
deleting one always succeeds.
"""

from fastapi import APIRouter, Response

from catalog.dependencies import BookInstances, FormFields
from catalog.exceptions import NotFoundError
from catalog.services.presentation import (
    present_deleted,
    present_saved,
    redirect,
    render,
)

router = APIRouter(
    prefix="/catalog",
    tags=["Book Instances"],
    responses={
        404: {"description": "Book copy not found"},
    },
)


@router.get("/bookinstances", summary="List all book copies")
async def bookinstance_list(bookinstances: BookInstances) -> Response:
    return render(
        "bookinstance_list",
        title="Book Instance List",
        bookinstance_list=await bookinstances.list(),
    )


@router.get("/bookinstance/create", summary="Book copy create form")
async def bookinstance_create_get(bookinstances: BookInstances) -> Response:
    form = await bookinstances.create_form()
    return render("bookinstance_form", title="Create BookInstance", **form.context)


@router.post("/bookinstance/create", summary="Create a book copy")
async def bookinstance_create_post(form: FormFields, bookinstances: BookInstances) -> Response:
    outcome = await bookinstances.create(form)
    return present_saved(
        outcome,
        view="bookinstance_form",
        title="Create BookInstance",
        record_key="bookinstance",
    )


@router.get("/bookinstance/{bookinstance_id:int}", summary="Get a book copy")
async def bookinstance_detail(bookinstance_id: int, bookinstances: BookInstances) -> Response:
    detail = await bookinstances.detail(bookinstance_id)
    return render("bookinstance_detail", title="Book:", bookinstance=detail.record)


@router.get("/bookinstance/{bookinstance_id:int}/delete", summary="Book copy delete confirmation")
async def bookinstance_delete_get(bookinstance_id: int, bookinstances: BookInstances) -> Response:
    try:
        detail = await bookinstances.delete_form(bookinstance_id)
    except NotFoundError:
        return redirect("/catalog/bookinstances")
    return render("bookinstance_delete", title="Delete BookInstance", bookinstance=detail.record)


@router.post("/bookinstance/{bookinstance_id:int}/delete", summary="Delete a book copy")
async def bookinstance_delete_post(bookinstance_id: int, bookinstances: BookInstances) -> Response:
    outcome = await bookinstances.delete(bookinstance_id)
    return present_deleted(
        outcome,
        view="bookinstance_delete",
        title="Delete BookInstance",
        record_key="bookinstance",
        dependents_key="dependents",
        list_url="/catalog/bookinstances",
    )


@router.get("/bookinstance/{bookinstance_id:int}/update", summary="Book copy update form")
async def bookinstance_update_get(bookinstance_id: int, bookinstances: BookInstances) -> Response:
    form = await bookinstances.update_form(bookinstance_id)
    return render(
        "bookinstance_form",
        title="Update BookInstance",
        bookinstance=form.record,
        **form.context,
    )


@router.post("/bookinstance/{bookinstance_id:int}/update", summary="Update a book copy")
async def bookinstance_update_post(
    bookinstance_id: int,
    form: FormFields,
    bookinstances: BookInstances,
) -> Response:
    outcome = await bookinstances.update(bookinstance_id, form)
    return present_saved(
        outcome,
        view="bookinstance_form",
        title="Update BookInstance",
        record_key="bookinstance",
    )
