import click
from flask.cli import with_appcontext

from jobboard.extensions import db
from jobboard.models import Role, User, UserStatus
from jobboard.services.auth import AuthService


@click.command("init-db")
@with_appcontext
def init_db():
    """Create all tables (migrations remain the source of truth in production)."""
    click.echo("🔧 Creating tables...")
    db.create_all()
    click.echo("✅ Tables created!")


@click.command("create-admin")
@click.option("--email", required=True)
@click.option("--name", default="Admin User", show_default=True)
@click.option("--password", prompt=True, hide_input=True, confirmation_prompt=True)
@with_appcontext
def create_admin(email, name, password):
    """Create an active Admin account unless the email is already taken."""
    if User.query.filter_by(email=email).first():
        click.echo(f"⚠️ User {email} already exists")
        return

    admin = User(
        name=name,
        email=email,
        password=AuthService.hash_password(password),
        role=Role.ADMIN.value,
        status=UserStatus.ACTIVE.value,
    )
    db.session.add(admin)
    db.session.commit()
    click.echo(f"✅ Admin created: {admin.email}")
