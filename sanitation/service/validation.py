from sanitation.errors import AuthRequiredError, ValidationError


def require_user(user_id: str | None) -> str:
    if not user_id:
        raise AuthRequiredError()
    return user_id


def require_text(value: str | None, label: str, min_length: int = 1) -> str:
    text = (value or "").strip()
    if len(text) < min_length:
        if min_length <= 1:
            raise ValidationError(f"{label} is required")
        raise ValidationError(f"{label} must be at least {min_length} characters")
    return text


def optional_text(value: str | None) -> str | None:
    text = (value or "").strip()
    return text or None
