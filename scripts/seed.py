# flake8: noqa
# scripts/seed.py

"""
데이터베이스 테이블을 만들고 초기 데이터를 채웁니다.

    python -m scripts.seed --email admin@restobar.com

권한, 역할('administrador', 'personal'), 관리자 계정, 기준 데이터를 생성하며
여러 번 실행해도 중복으로 만들지 않습니다.
"""

import asyncio
from typing import Optional

import typer

from restobar.core.config import settings
from restobar.core.database import create_db_and_tables, get_async_session_context
from restobar.core.logging_config import configure_logging
from restobar.domains.seed import seed_all

cli = typer.Typer()


@cli.command()
def main(
    email: str = typer.Option(
        settings.ADMIN_EMAIL, '--email', '-e',
        help="관리자 계정 이메일입니다. 기본값은 ADMIN_EMAIL 설정입니다."
    ),
    password: Optional[str] = typer.Option(
        None, '--password', '-p',
        help="관리자 비밀번호입니다. 생략하면 ADMIN_PASSWORD 설정을 사용합니다."
    ),
    create_tables: bool = typer.Option(
        True, '--create-tables/--no-create-tables',
        help="테이블이 없으면 생성합니다. Alembic으로 관리하는 환경에서는 끄십시오."
    ),
):
    """
    RestoBar 애플리케이션의 초기 데이터를 생성합니다.
    """
    configure_logging()
    admin_password = password or settings.ADMIN_PASSWORD.get_secret_value()
    if len(admin_password) < 8:
        typer.echo("오류: 비밀번호는 최소 8자 이상이어야 합니다.")
        raise typer.Abort()

    async def run_seed():
        if create_tables:
            await create_db_and_tables()
        async with get_async_session_context() as db:
            admin = await seed_all(db, admin_email=email, admin_password=admin_password)
        typer.echo(f"초기 데이터 생성 완료. 관리자: {admin.email}")

    asyncio.run(run_seed())


if __name__ == "__main__":
    cli()
