from sitecontent.domain.exceptions import InvariantViolation

MIN_USERNAME_LENGTH = 3
MIN_PASSWORD_LENGTH = 8
FORBIDDEN_USERNAME_CHARS = set(":*?[] \t\n")


def assert_credentials_present(username, password):
    if not username or not password:
        raise InvariantViolation("Username and password are required.")

    if not isinstance(username, str) or not isinstance(password, str):
        raise InvariantViolation("Username and password must be strings.")


def assert_new_user(username, password):
    assert_credentials_present(username, password)

    if len(username) < MIN_USERNAME_LENGTH:
        raise InvariantViolation(
            f"Username must be at least {MIN_USERNAME_LENGTH} characters long."
        )

    # Usernames are embedded in store keys and scan patterns
    if FORBIDDEN_USERNAME_CHARS & set(username):
        raise InvariantViolation("Username contains invalid characters.")

    if len(password) < MIN_PASSWORD_LENGTH:
        raise InvariantViolation(
            f"Password must be at least {MIN_PASSWORD_LENGTH} characters long."
        )
