"""Production container and its FastAPI hookup."""

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider, setup_dishka
from fastapi import FastAPI

from natter.util.di import resolve_providers


def create_container() -> AsyncContainer:
    """Container with every production provider.

    Settings are read from the environment on first resolution.
    """
    return make_async_container(*resolve_providers(), FastapiProvider())


def setup_di(app: FastAPI, container: AsyncContainer) -> None:
    """Make `container` serve `FromDishka[...]` parameters of `app`'s routes."""
    setup_dishka(container, app)
