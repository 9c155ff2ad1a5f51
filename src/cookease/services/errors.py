"""Business errors raised by services and translated at the HTTP boundary."""


class CookEaseError(Exception):
    """Base class for errors reported to API clients."""

    code = "SERVER_ERROR"
    status_code = 500
    default_message = "Internal server error"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationFailed(CookEaseError):
    code = "VALIDATION_ERROR"
    status_code = 400
    default_message = "Validation failed"


class UsernameTaken(CookEaseError):
    code = "USERNAME_EXISTS"
    status_code = 409
    default_message = "Username already taken"


class EmailTaken(CookEaseError):
    code = "EMAIL_EXISTS"
    status_code = 409
    default_message = "Email already registered"


class InvalidCredentials(CookEaseError):
    code = "INVALID_CREDENTIALS"
    status_code = 401
    default_message = "Invalid email or password"


class NoLocalAuth(InvalidCredentials):
    """The account exists but has no password set."""

    code = "NO_LOCAL_AUTH"
    default_message = "Please use Google login or register with a password first"


class MissingToken(CookEaseError):
    code = "NO_TOKEN"
    status_code = 401
    default_message = "Access token is required"


class InvalidToken(CookEaseError):
    code = "INVALID_TOKEN"
    status_code = 401
    default_message = "Invalid token"


class TokenExpired(CookEaseError):
    code = "TOKEN_EXPIRED"
    status_code = 401
    default_message = "Token has expired"


class UserNotFound(CookEaseError):
    code = "USER_NOT_FOUND"
    status_code = 404
    default_message = "User not found"


class RecipeNotFound(CookEaseError):
    code = "RECIPE_NOT_FOUND"
    status_code = 404
    default_message = "Recipe not found"


class IngredientNotFound(CookEaseError):
    code = "INGREDIENT_NOT_FOUND"
    status_code = 404
    default_message = "Ingredient not found"


class ItemNotInCart(CookEaseError):
    code = "ITEM_NOT_IN_CART"
    status_code = 404
    default_message = "Item not found in cart"


class EmailLinkedToDifferentGoogleAccount(CookEaseError):
    code = "email_already_linked_to_different_google_account"
    status_code = 409
    default_message = "Email is already linked to a different Google account"


class GoogleAuthFailed(CookEaseError):
    code = "google_auth_failed"
    status_code = 502
    default_message = "Google authentication failed"


class GoogleAuthDisabled(CookEaseError):
    code = "GOOGLE_AUTH_DISABLED"
    status_code = 503
    default_message = "Google login is not configured"


class RecommendationUnavailable(CookEaseError):
    code = "RECOMMENDATION_UNAVAILABLE"
    status_code = 500
    default_message = "Failed to get AI recommendations"


class RecommendationParseError(RecommendationUnavailable):
    """The generator answered but no id list could be read from it."""
