# Error taxonomy for the digest pipeline.
#
# ConfigError is fatal for the whole run. The document-level errors
# (extraction, transport, decode) abort the current batch, which the
# orchestrator reports as a BatchError and skips.


class DigestError(Exception):
    pass


class ConfigError(DigestError):
    pass


class ExtractionError(DigestError):

    def __init__(self, path: str, detail: str):
        super().__init__(f"could not extract text from {path}: {detail}")
        self.path = path
        self.detail = detail


class LLMTransportError(DigestError):
    pass


class SummaryDecodeError(DigestError):
    pass


class BatchError(DigestError):

    def __init__(self, filename: str, cause: Exception):
        super().__init__(f"error processing {filename}: {cause}")
        self.filename = filename
        self.cause = cause


class ResultsWriteError(DigestError):

    def __init__(self, path: str, cause: OSError):
        super().__init__(f"could not write results to {path}: {cause}")
        self.path = path
        self.cause = cause
