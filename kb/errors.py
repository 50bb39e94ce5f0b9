"""
Error types for parsing operations.

Two kinds only:
- ValidationError: the caller can fix it (bad path, sandbox escape, oversize file)
- FileOperationError: the environment failed (missing file, read or extraction failure)
"""
from typing import Any, Dict, Optional


class RAGError(Exception):
    """Base error for parser operations"""

    code = "RAG_ERROR"
    status_code = 500

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details

    def to_dict(self) -> Dict[str, Any]:
        """Serializable form for logs and CLI output"""
        return {
            'name': type(self).__name__,
            'code': self.code,
            'message': self.message,
            'status_code': self.status_code,
            'details': self.details,
        }


class ValidationError(RAGError):
    """Invalid input: path outside base dir, file too large, bad configuration"""

    code = "VALIDATION_ERROR"
    status_code = 400


class FileOperationError(RAGError):
    """File could not be read or its content could not be extracted"""

    code = "FILE_OPERATION_ERROR"
    status_code = 500
