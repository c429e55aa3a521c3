"""Jinja2 environment shared by all views."""

from functools import lru_cache

from jinja2 import Environment, PackageLoader, select_autoescape


@lru_cache(maxsize=1)
def get_environment() -> Environment:
    return Environment(
        loader=PackageLoader("gitcard", "templates"),
        autoescape=select_autoescape(["html"]),
        trim_blocks=True,
        lstrip_blocks=True,
    )


def render_template(name: str, **context) -> str:
    return get_environment().get_template(name).render(**context)
