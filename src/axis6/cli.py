"""Flask CLI commands for AXIS6."""

from __future__ import annotations

from datetime import date, datetime

import click


def _parse_day(_ctx, _param, value: str | None) -> date | None:
    if value is None:
        return None
    try:
        return datetime.strptime(value, "%Y-%m-%d").date()
    except ValueError as exc:
        raise click.BadParameter("expected YYYY-MM-DD") from exc


def _describe(streak) -> str:
    if streak is None:
        return "no streak recorded"
    last = streak.last_checkin_date.isoformat() if streak.last_checkin_date else "never"
    return (
        f"current={streak.current_streak} longest={streak.longest_streak} "
        f"last={last}"
    )


def init_app(app) -> None:
    """Register CLI commands on the Flask app."""

    @app.cli.command("axis6-seed")
    @click.option("--profile", "profile_id", default=None, help="Also create this profile id")
    def axis6_seed(profile_id: str | None) -> None:
        """Seed the six categories (and optionally a profile)."""

        from .extensions import get_services

        services = get_services()
        categories = services.categories.ensure_defaults()
        click.echo(f"{len(categories)} categories available.")
        if profile_id:
            services.profiles.ensure(profile_id)
            click.echo(f"Profile {profile_id} ready.")

    @app.cli.command("axis6-update-streak")
    @click.argument("user_id")
    @click.argument("category")
    @click.option("--date", "on", callback=_parse_day, default=None, help="Day (YYYY-MM-DD), defaults to today")
    @click.option("--undo", is_flag=True, default=False, help="Un-mark the day instead")
    def axis6_update_streak(user_id: str, category: str, on: date | None, undo: bool) -> None:
        """Toggle a check-in for USER_ID in CATEGORY (id or slug)."""

        from .extensions import get_services

        try:
            result = get_services().checkin_service.toggle(user_id, category, not undo, on=on)
        except ValueError as exc:
            raise click.ClickException(str(exc)) from exc
        click.echo(f"{result.action}: {_describe(result.streak)}")

    @app.cli.command("axis6-recalculate")
    @click.argument("user_id")
    @click.option("--category", default=None, help="Only this category (id or slug)")
    def axis6_recalculate(user_id: str, category: str | None) -> None:
        """Rebuild streaks for USER_ID from stored check-ins."""

        from .extensions import get_services

        service = get_services().checkin_service
        try:
            if category:
                click.echo(_describe(service.recalculate(user_id, category)))
                return
            rebuilt = service.recalculate_all(user_id)
        except ValueError as exc:
            raise click.ClickException(str(exc)) from exc
        for streak in rebuilt:
            click.echo(f"category {streak.category_id}: {_describe(streak)}")
        click.echo(f"Recalculated {len(rebuilt)} streaks.")
