"""Authentication and authorization.

Learn: Users register and log in with email/password and receive an
HS256-signed JWT. The only authorization rule is ownership: a task
belongs to the user who created it, forever.

- password.py  → bcrypt hashing and verification
- jwt.py       → TokenIssuer (issue + verify)
- ownership.py → OwnershipGuard (bind owner on create, pin it on update)
"""
