# flake8: noqa
# scripts/create_admin.py

import asyncio

import typer

from restobar.core.database import get_async_session_context
from restobar.domains.seed import seed_permissions, seed_roles, seed_user
from restobar.domains.usr import crud as usr_crud
from restobar.domains.usr.resources import ADMIN_ROLE

cli = typer.Typer()


async def create_admin_user(email: str, password: str, name: str) -> None:
    """
    'administrador' 역할을 가진 사용자를 생성합니다. 권한/역할이 없으면 함께 만듭니다.
    """
    async with get_async_session_context() as db:
        if await usr_crud.user.get_by_email(db, email=email):
            typer.echo(f"오류: 이미 존재하는 이메일입니다: {email}")
            return
        await seed_permissions(db)
        roles = await seed_roles(db)
        user = await seed_user(db, email=email, password=password, name=name, roles=[roles[ADMIN_ROLE]])
        typer.echo(f"관리자 계정이 성공적으로 생성되었습니다: {user.email} ({user.name})")


@cli.command()
def main(
    email: str = typer.Option(
        ..., '--email', '-e',
        prompt="관리자 이메일을 입력하세요",
        help="생성할 관리자 계정의 이메일 주소입니다."
    ),
    password: str = typer.Option(
        ..., '--password', '-p',
        prompt="관리자 비밀번호를 입력하세요",
        hide_input=True,
        confirmation_prompt=True,
        help="생성할 관리자 계정의 비밀번호입니다. (최소 8자 이상)"
    ),
    name: str = typer.Option(
        "administrador", '--name', '-n',
        help="관리자의 이름입니다."
    ),
):
    """
    RestoBar 애플리케이션을 위한 새로운 관리자 계정을 생성합니다.
    """
    if len(password) < 8:
        typer.echo("오류: 비밀번호는 최소 8자 이상이어야 합니다.")
        raise typer.Abort()

    asyncio.run(create_admin_user(email, password, name))


if __name__ == "__main__":
    cli()
