# ticketgate/core/errors.py
"""Error taxonomy shared by the service and HTTP layers.

Each error carries the HTTP status it maps to and a message that is safe to
return to the caller as ``{"error": message}``.
"""


class TicketError(Exception):
    status_code = 500
    message = "Internal server error"

    def __init__(self, message: str | None = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


class ValidationError(TicketError):
    status_code = 400
    message = "All fields (taxId, firstName, lastName) are required"


class Unauthorized(TicketError):
    status_code = 401
    message = "Unauthorized: Invalid client credentials"


class CapReached(TicketError):
    status_code = 400

    def __init__(self, cap: int = 3):
        super().__init__(f"Limit of {cap} tickets per tax id reached")


class NotFound(TicketError):
    status_code = 404
    message = "Ticket not found"


class InternalFailure(TicketError):
    status_code = 500
    message = "Internal server error"
