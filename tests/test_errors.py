"""Tests for the parser error taxonomy"""
from errors import FileOperationError, RAGError, ValidationError


class TestErrorTypes:

    def test_validation_error(self):
        error = ValidationError("File path must not be empty")

        assert isinstance(error, RAGError)
        assert error.code == "VALIDATION_ERROR"
        assert error.status_code == 400
        assert str(error) == "File path must not be empty"

    def test_file_operation_error(self):
        error = FileOperationError("File not found: /kb/a.txt", details={'path': '/kb/a.txt'})

        assert isinstance(error, RAGError)
        assert error.code == "FILE_OPERATION_ERROR"
        assert error.status_code == 500
        assert error.details == {'path': '/kb/a.txt'}

    def test_kinds_are_distinct(self):
        assert not issubclass(ValidationError, FileOperationError)
        assert not issubclass(FileOperationError, ValidationError)

    def test_to_dict(self):
        error = ValidationError("too big", details={'size': 11})

        assert error.to_dict() == {
            'name': 'ValidationError',
            'code': 'VALIDATION_ERROR',
            'message': 'too big',
            'status_code': 400,
            'details': {'size': 11},
        }
