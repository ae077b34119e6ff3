class DocumentError(RuntimeError):
    pass


class InvalidInputError(DocumentError):
    pass


class NotFoundError(DocumentError):
    pass


class ExtractionFailedError(DocumentError):
    pass


class StorageFailedError(DocumentError):
    pass


class DuplicateIDError(DocumentError):
    pass
