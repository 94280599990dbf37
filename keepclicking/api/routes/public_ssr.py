"""
Public SSR Routes - Server-side rendered site pages.

Each page reads the visitor's theme from the request-scoped theme store,
so the first paint already carries the right variant.
"""

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import HTMLResponse

from keepclicking.api.deps import get_site_renderer, get_theme_store
from keepclicking.components.theme import ThemeStore
from keepclicking.ui.site import SiteRenderer

router = APIRouter()


@router.get("/", response_class=HTMLResponse)
def home_page(
    site: SiteRenderer = Depends(get_site_renderer),
    store: ThemeStore = Depends(get_theme_store),
) -> HTMLResponse:
    return HTMLResponse(site.home(store))


@router.get("/resources/", response_class=HTMLResponse)
def resources_page(
    site: SiteRenderer = Depends(get_site_renderer),
    store: ThemeStore = Depends(get_theme_store),
) -> HTMLResponse:
    return HTMLResponse(site.resource_page(store))


@router.get("/tags/", response_class=HTMLResponse)
def tags_page(
    site: SiteRenderer = Depends(get_site_renderer),
    store: ThemeStore = Depends(get_theme_store),
) -> HTMLResponse:
    return HTMLResponse(site.tags_index(store))


@router.get("/tags/{tag}/", response_class=HTMLResponse)
def tag_page(
    tag: str,
    site: SiteRenderer = Depends(get_site_renderer),
    store: ThemeStore = Depends(get_theme_store),
) -> HTMLResponse:
    html = site.tag(tag, store)
    if html is None:
        raise HTTPException(status_code=404, detail="Tag not found")
    return HTMLResponse(html)


@router.get("/{slug}/", response_class=HTMLResponse)
def slug_page(
    slug: str,
    site: SiteRenderer = Depends(get_site_renderer),
    store: ThemeStore = Depends(get_theme_store),
) -> HTMLResponse:
    """A blog post, or the about page when the slug matches it."""
    html = site.slug_page(slug, store)
    if html is None:
        raise HTTPException(status_code=404, detail="Page not found")
    return HTMLResponse(html)
