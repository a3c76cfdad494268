class NftError(Exception):
    """Base class for a rejected registry call. Nothing is changed when raised."""

    kind: str = "NftError"

    def __init__(self, message: str = "", **kargs):
        for arg, value in kargs.items():
            setattr(self, arg, value)
        self._args = kargs
        super().__init__(message or self.kind)

    def to_dict(self) -> dict:
        return dict(self._args)


class DuplicateTokenIdError(NftError):
    """
    Happens when mint targets a token_id which already exists in the token store
    """

    kind = "DuplicateTokenId"
    token_id: str

    def __init__(self, token_id):
        super().__init__(f"Token {token_id} already exists", token_id=token_id)


class TokenNotFoundError(NftError):
    """
    Call references a token_id which was never minted
    """

    kind = "TokenNotFound"
    token_id: str

    def __init__(self, token_id):
        super().__init__(f"Token {token_id} not found", token_id=token_id)


class UnauthorizedError(NftError):
    """
    Only the current owner can transfer a token
    """

    kind = "Unauthorized"
    token_id: str
    account_id: str
    owner_id: str

    def __init__(self, token_id, account_id, owner_id):
        super().__init__(
            f"@{account_id} is not the owner of token {token_id}",
            token_id=token_id,
            account_id=account_id,
            owner_id=owner_id,
        )


class SelfTransferRejectedError(NftError):
    """
    Token owner and receiver should be different
    """

    kind = "SelfTransferRejected"
    token_id: str
    account_id: str

    def __init__(self, token_id, account_id):
        super().__init__(
            f"Token {token_id} owner and receiver @{account_id} should be different",
            token_id=token_id,
            account_id=account_id,
        )


class InvalidAccountIdError(NftError):
    """
    Receiver account id doesn't follow NEAR account id rules
    """

    kind = "InvalidAccountId"
    account_id: str

    def __init__(self, account_id):
        super().__init__(f"Invalid account id {account_id!r}", account_id=account_id)


class InvalidArgumentsError(NftError):
    """
    Call arguments or caller id don't pass model validation
    """

    kind = "InvalidArguments"
    method: str
    reason: str

    def __init__(self, method, reason):
        super().__init__(
            f"Invalid arguments for {method}: {reason}", method=method, reason=reason
        )


_ERROR_TYPE_TO_EXCEPTION = {
    "DuplicateTokenId": DuplicateTokenIdError,
    "TokenNotFound": TokenNotFoundError,
    "Unauthorized": UnauthorizedError,
    "SelfTransferRejected": SelfTransferRejectedError,
    "InvalidAccountId": InvalidAccountIdError,
    "InvalidArguments": InvalidArgumentsError,
}


def parse_error(error_type, args):
    return _ERROR_TYPE_TO_EXCEPTION[error_type](**args)
