import argparse
import logging
import os
import shutil
import sys
from pathlib import Path
from urllib.parse import unquote

from keepclicking.adapters.local_storage import InMemoryPreferenceStorage, create_local_storage
from keepclicking.app_shell.context import ServiceContext
from keepclicking.components.content import ListPostsInput, run_list_posts
from keepclicking.components.theme import (
    InvalidThemeError,
    ReadThemeInput,
    SetThemeInput,
    create_theme_store,
    run_read,
    run_set,
)
from keepclicking.config.loader import load_config

logger = logging.getLogger("cli")

CONFIG_PATH = "site.yaml"
STATIC_DIR = Path(__file__).resolve().parent.parent / "static"


def get_context(config_path: str | None, static_prefix: str = "/static") -> ServiceContext:
    path = Path(config_path or os.environ.get("KEEPCLICKING_CONFIG", CONFIG_PATH))
    if not path.exists():
        logger.error("Config file %s not found.", path)
        sys.exit(1)

    config = load_config(path)
    return ServiceContext.create(
        config,
        path.resolve().parent,
        content_dir=os.environ.get("KEEPCLICKING_CONTENT_DIR") or None,
        static_prefix=static_prefix,
    )


def output_file(out_dir: Path, page_path: str) -> Path:
    """
    Where a site path lands in the exported tree.

    Raises ValueError for paths that would land outside out_dir.
    """
    relative = unquote(page_path).strip("/")
    if not relative:
        return out_dir / "index.html"

    parts = relative.replace("\\", "/").split("/")
    if any(part in ("", ".", "..") for part in parts):
        raise ValueError(f"unsafe page path: {page_path!r}")

    target = out_dir.joinpath(*parts, "index.html")
    if not target.resolve().is_relative_to(out_dir.resolve()):
        raise ValueError(f"page path escapes build directory: {page_path!r}")
    return target


def handle_build(ctx: ServiceContext, args: argparse.Namespace) -> None:
    out_dir = Path(args.out)
    out_dir.mkdir(parents=True, exist_ok=True)

    theme_cfg = ctx.config.theme
    site = ctx.site

    count = 0
    for page_path in site.page_paths():
        # Each page gets a fresh store so every page starts at the default
        store = create_theme_store(
            InMemoryPreferenceStorage(),
            default=theme_cfg.default_variant,
            key=theme_cfg.storage_key,
        )
        html = site.render_path(page_path, store)
        if html is None:
            logger.warning("Skipping %s: nothing to render", page_path)
            continue

        try:
            target = output_file(out_dir, page_path)
        except ValueError as e:
            logger.warning("Skipping %s: %s", page_path, e)
            continue
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(html, encoding="utf-8")
        count += 1

    (out_dir / "404.html").write_text(site.not_found("/404.html"), encoding="utf-8")

    static_out = out_dir / "static"
    if static_out.exists():
        shutil.rmtree(static_out)
    shutil.copytree(STATIC_DIR, static_out)

    print(f"Built {count} pages into {out_dir}")


def handle_posts(ctx: ServiceContext, args: argparse.Namespace) -> None:
    result = run_list_posts(ListPostsInput(tag=args.tag), source=ctx.post_source)
    for post in result.posts:
        tags = f"  [{', '.join(post.tags)}]" if post.tags else ""
        print(f"{post.date.isoformat()}  {post.slug}  {post.display_title}{tags}")
    print(f"{result.total} posts")


def handle_theme(args: argparse.Namespace) -> None:
    storage = create_local_storage(args.prefs)
    store = create_theme_store(storage)

    if args.variant is None:
        print(run_read(ReadThemeInput(), store=store).theme)
        return

    try:
        result = run_set(SetThemeInput(theme=args.variant), store=store)
    except InvalidThemeError as e:
        logger.error("%s", e)
        sys.exit(2)

    suffix = "" if result.persisted else " (not saved)"
    print(f"{result.theme}{suffix}")


def main(argv: list[str] | None = None) -> None:
    logging.basicConfig(level=logging.INFO)

    parser = argparse.ArgumentParser(description="just keep clicking site tools")
    parser.add_argument("--config", help="Path to site.yaml (default: $KEEPCLICKING_CONFIG)")
    subparsers = parser.add_subparsers(dest="command", required=True)

    # build
    build_parser = subparsers.add_parser("build", help="Export the site as static HTML")
    build_parser.add_argument("--out", default="public", help="Output directory")

    # posts
    posts_parser = subparsers.add_parser("posts", help="List posts, newest first")
    posts_parser.add_argument("--tag", help="Only posts with this tag")

    # theme
    theme_parser = subparsers.add_parser("theme", help="Read or set the saved theme")
    theme_parser.add_argument("variant", nargs="?", help="light or dark")
    theme_parser.add_argument("--prefs", help="Preferences file (default: $KEEPCLICKING_PREFS_PATH)")

    args = parser.parse_args(argv)

    if args.command == "theme":
        handle_theme(args)
        return

    ctx = get_context(args.config)

    if args.command == "build":
        handle_build(ctx, args)
    elif args.command == "posts":
        handle_posts(ctx, args)


if __name__ == "__main__":
    main()
