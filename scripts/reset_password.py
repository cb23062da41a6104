# flake8: noqa
# scripts/reset_password.py

"""
사용자 비밀번호를 임시 비밀번호로 재설정합니다.

    python -m scripts.reset_password --email mozo@restobar.com

재설정된 계정은 password_reset_required가 켜지며, 로그인 후 /usr/auth/me의
must_reset 값으로 비밀번호 변경이 필요함을 알 수 있습니다.
"""

import asyncio

import typer

from restobar.core.database import engine, get_async_session_context
from restobar.core.security import get_password_hash
from restobar.domains.usr import crud as usr_crud

cli = typer.Typer()


async def reset_password(email: str, new_password: str, force_change: bool) -> bool:
    async with get_async_session_context() as db:
        user = await usr_crud.user.get_by_email(db, email=email)
        if user is not None:
            user.password_hash = get_password_hash(new_password)
            user.password_reset_required = force_change
            db.add(user)
    await engine.dispose()
    return user is not None


@cli.command()
def main(
    email: str = typer.Option(..., '--email', '-e', help="비밀번호를 재설정할 계정의 이메일입니다."),
    password: str = typer.Option(
        ..., '--password', '-p',
        prompt="새 비밀번호를 입력하세요",
        hide_input=True,
        confirmation_prompt=True,
        help="새 비밀번호 (최소 8자 이상)"
    ),
    force_change: bool = typer.Option(
        True, '--force-change/--no-force-change',
        help="다음 로그인 후 비밀번호 변경을 요구합니다."
    ),
):
    if len(password) < 8:
        typer.echo("오류: 비밀번호는 최소 8자 이상이어야 합니다.")
        raise typer.Abort()

    if asyncio.run(reset_password(email, password, force_change)):
        typer.echo(f"비밀번호가 재설정되었습니다: {email}")
    else:
        typer.echo(f"오류: 사용자를 찾을 수 없습니다: {email}")
        raise typer.Exit(code=1)


if __name__ == "__main__":
    cli()
