"""Signed-in user model."""
from dataclasses import dataclass, asdict


@dataclass
class User:
    uid: str
    email: str
    display_name: str
    is_admin: bool = False

    @classmethod
    def from_userinfo(cls, userinfo, admin_emails):
        """Build a user from an OpenID Connect userinfo payload."""
        email = userinfo.get('email') or ''
        return cls(
            uid=userinfo.get('sub') or email,
            email=email,
            display_name=userinfo.get('name') or email,
            is_admin=email.lower() in {e.lower() for e in admin_emails},
        )

    @classmethod
    def from_session(cls, data):
        if not data:
            return None
        return cls(**data)

    def to_session(self):
        return asdict(self)
