# jobboard/services/auth.py
import logging
import secrets

from flask_jwt_extended import create_access_token
from sqlalchemy.exc import IntegrityError

from jobboard.errors import BadRequest, Conflict, NotFound, Unauthorized
from jobboard.extensions import bcrypt, db, identity_provider
from jobboard.models import Role, User, UserStatus

logger = logging.getLogger(__name__)

_INACTIVE_MESSAGES = {
    UserStatus.PENDING.value: "Account is pending approval",
    UserStatus.DEACTIVATED.value: "Account is deactivated",
}


class AuthService:
    @staticmethod
    def issue_token(user):
        """Signed JWT whose subject is the user id; expiry comes from config."""
        return create_access_token(identity=str(user.id))

    @staticmethod
    def hash_password(password):
        return bcrypt.generate_password_hash(password).decode("utf-8")

    @staticmethod
    def check_active(user):
        message = _INACTIVE_MESSAGES.get(user.status)
        if message:
            logger.info(f"❌ Blocked login for {user.email}: {user.status}")
            raise Unauthorized(message)

    @staticmethod
    def register(data):
        """
        Create a new active user and return (user, token).
        Self-registration may pick Job Seeker or Recruiter, never Admin.
        """
        logger.info(f"📝 Register attempt: {data.email}, role: {data.role}")

        role = Role.normalize(data.role, default=None) if data.role else Role.JOB_SEEKER
        if role is None or role == Role.ADMIN:
            raise BadRequest("Invalid role")

        if User.query.filter_by(email=data.email).first():
            logger.info(f"❌ Email already registered: {data.email}")
            raise Conflict("User already exists")

        user = User(
            name=data.name,
            email=data.email,
            password=AuthService.hash_password(data.password),
            role=role.value,
            status=UserStatus.ACTIVE.value,
            department=data.department,
            year=data.year,
            cgpa=data.cgpa,
            skills=data.skills,
            resume=data.resume,
            company_name=data.company_name,
        )

        try:
            db.session.add(user)
            db.session.commit()
        except IntegrityError:
            db.session.rollback()
            raise Conflict("User already exists")

        logger.info(f"✅ Registration successful for {user.email}")
        return user, AuthService.issue_token(user)

    @staticmethod
    def authenticate_user(email, password):
        """Check email & password with bcrypt, then the account status."""
        user = User.query.filter_by(email=email).first()

        if not user or not user.password or not bcrypt.check_password_hash(user.password, password):
            logger.info(f"❌ Invalid credentials for {email}")
            raise Unauthorized("Invalid email or password")

        AuthService.check_active(user)

        logger.info(f"✅ Auth successful for {email}, role: {user.role}")
        return user, AuthService.issue_token(user)

    @staticmethod
    def federated_login(access_token, requested_role=None):
        """
        Sign in with a Google access token. Returns (user, token, created).

        An existing account is matched by Google id or email and gets the
        Google id linked; otherwise a new active account is created with an
        unusable random password.
        """
        profile = identity_provider.fetch_profile(access_token)

        user = User.query.filter(
            db.or_(User.google_id == profile["sub"], User.email == profile["email"])
        ).first()

        if user:
            if not user.google_id:
                user.google_id = profile["sub"]
                if not user.avatar:
                    user.avatar = profile.get("picture")
                db.session.commit()
                logger.info(f"🔗 Linked Google account to {user.email}")

            AuthService.check_active(user)
            return user, AuthService.issue_token(user), False

        role = Role.normalize(requested_role, default=Role.JOB_SEEKER)
        if role == Role.ADMIN:
            role = Role.JOB_SEEKER

        user = User(
            name=profile["name"],
            email=profile["email"],
            password=AuthService.hash_password(secrets.token_urlsafe(32)),
            role=role.value,
            status=UserStatus.ACTIVE.value,
            google_id=profile["sub"],
            avatar=profile.get("picture"),
        )
        db.session.add(user)
        db.session.commit()

        logger.info(f"✅ Created Google account for {user.email}, role: {user.role}")
        return user, AuthService.issue_token(user), True

    @staticmethod
    def update_profile(user, data):
        """Partial update; blank or missing fields keep their current value."""
        if data.email and data.email != user.email:
            taken = User.query.filter(User.email == data.email, User.id != user.id).first()
            if taken:
                raise Conflict("Email already in use")
            user.email = data.email

        if data.name:
            user.name = data.name
        if data.password:
            user.password = AuthService.hash_password(data.password)

        for field in ("department", "year", "cgpa", "skills", "resume", "company_name"):
            value = getattr(data, field)
            if value is not None:
                setattr(user, field, value)

        db.session.commit()
        logger.info(f"✅ Profile updated for {user.email}")
        return user, AuthService.issue_token(user)

    @staticmethod
    def get_user_or_404(user_id):
        user = db.session.get(User, user_id)
        if not user:
            raise NotFound("User not found")
        return user

    @staticmethod
    def set_status(user_id, status):
        user = AuthService.get_user_or_404(user_id)
        user.status = status.value
        db.session.commit()
        logger.info(f"👤 Status of {user.email} set to {user.status}")
        return user

    @staticmethod
    def delete_user(user_id):
        user = AuthService.get_user_or_404(user_id)
        db.session.delete(user)
        db.session.commit()
        logger.info(f"🗑️ User removed: {user_id}")
