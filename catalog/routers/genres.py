"""
Genres Router

List, detail, create, update and delete pages for genres.

Every handler delegates to GenreLifecycle and hands the outcome to the
presentation adapter; no business rules live here.
"""

from fastapi import APIRouter, Response

from catalog.dependencies import FormFields, Genres
from catalog.exceptions import NotFoundError
from catalog.services.presentation import (
    present_deleted,
    present_saved,
    redirect,
    render,
)

router = APIRouter(
    prefix="/catalog",
    tags=["Genres"],
    responses={
        404: {"description": "Genre not found"},
    },
)


@router.get(
    "/genres",
    summary="List all genres",
    description="All genres sorted by name.",
)
async def genre_list(genres: Genres) -> Response:
    return render("genre_list", title="Genre List", genre_list=await genres.list())


# The create routes are declared before /genre/{genre_id} so the
# literal path wins; the int convertor would reject "create" anyway.
@router.get("/genre/create", summary="Genre create form")
async def genre_create_get(genres: Genres) -> Response:
    form = await genres.create_form()
    return render("genre_form", title="Create Genre", **form.context)


@router.post(
    "/genre/create",
    summary="Create a genre",
    description=(
        "Create a genre from a submitted form. If a genre with the same "
        "name exists, redirect to it instead of creating a duplicate."
    ),
)
async def genre_create_post(form: FormFields, genres: Genres) -> Response:
    outcome = await genres.create(form)
    return present_saved(outcome, view="genre_form", title="Create Genre", record_key="genre")


@router.get(
    "/genre/{genre_id:int}",
    summary="Get a genre",
    description="A genre and the books filed under it.",
)
async def genre_detail(genre_id: int, genres: Genres) -> Response:
    detail = await genres.detail(genre_id)
    return render(
        "genre_detail",
        title="Genre Detail",
        genre=detail.record,
        genre_books=detail.dependents,
    )


@router.get("/genre/{genre_id:int}/delete", summary="Genre delete confirmation")
async def genre_delete_get(genre_id: int, genres: Genres) -> Response:
    """Show the genre and any books that would block its deletion."""
    try:
        detail = await genres.delete_form(genre_id)
    except NotFoundError:
        return redirect("/catalog/genres")
    return render(
        "genre_delete",
        title="Delete Genre",
        genre=detail.record,
        genre_books=detail.dependents,
    )


@router.post(
    "/genre/{genre_id:int}/delete",
    summary="Delete a genre",
    description="Delete a genre unless books are still filed under it.",
)
async def genre_delete_post(genre_id: int, genres: Genres) -> Response:
    outcome = await genres.delete(genre_id)
    return present_deleted(
        outcome,
        view="genre_delete",
        title="Delete Genre",
        record_key="genre",
        dependents_key="genre_books",
        list_url="/catalog/genres",
    )


@router.get("/genre/{genre_id:int}/update", summary="Genre update form")
async def genre_update_get(genre_id: int, genres: Genres) -> Response:
    form = await genres.update_form(genre_id)
    return render("genre_form", title="Update Genre", genre=form.record, **form.context)


@router.post("/genre/{genre_id:int}/update", summary="Update a genre")
async def genre_update_post(genre_id: int, form: FormFields, genres: Genres) -> Response:
    outcome = await genres.update(genre_id, form)
    return present_saved(outcome, view="genre_form", title="Update Genre", record_key="genre")
