"""State transitions for the users listing.

Each function takes the current CollectionState plus an input and returns a
new CollectionState. Nothing here touches the network.
"""
from __future__ import annotations

from dataclasses import replace
from typing import Iterable

from .models import UserFields, UserRecord
from .query import apply_filter, clamp_page
from .state import CollectionState


def refresh(state: CollectionState) -> CollectionState:
    """Recompute the filtered view and keep the page cursor in range."""
    filtered = tuple(apply_filter(state.users, state.search_query))
    return replace(
        state,
        filtered_users=filtered,
        current_page=clamp_page(state.current_page, filtered, state.page_size),
    )


def search(state: CollectionState, query: str) -> CollectionState:
    # a new search always starts from the first page
    return refresh(replace(state, search_query=query, current_page=1))


def change_page(state: CollectionState, delta: int) -> CollectionState:
    target = clamp_page(state.current_page + delta, state.filtered_users, state.page_size)
    if target == state.current_page:
        return state
    return replace(state, current_page=target)


def set_page_size(state: CollectionState, page_size: int) -> CollectionState:
    if page_size <= 0:
        raise ValueError(f"page_size must be > 0, got {page_size}")
    return refresh(replace(state, page_size=page_size))


def replace_users(state: CollectionState, users: Iterable[UserRecord]) -> CollectionState:
    return refresh(replace(state, users=tuple(users)))


def next_user_id(users: Iterable[UserRecord]) -> int:
    return max((user.id for user in users), default=0) + 1


def insert_created(state: CollectionState, created: UserRecord) -> CollectionState:
    """Put a newly created user first, with an id unique within the collection."""
    record = created.model_copy(update={"id": next_user_id(state.users)})
    return refresh(replace(state, users=(record, *state.users)))


def apply_update(state: CollectionState, user_id: int, fields: UserFields) -> CollectionState:
    if state.find_user(user_id) is None:
        return state
    users = tuple(user.with_fields(fields) if user.id == user_id else user for user in state.users)
    return refresh(replace(state, users=users))


def remove_user(state: CollectionState, user_id: int) -> CollectionState:
    if state.find_user(user_id) is None:
        return state
    return refresh(replace(state, users=tuple(user for user in state.users if user.id != user_id)))
