import pytest
from fastapi import UploadFile
from io import BytesIO

from rental_api.errors import FileTooLarge, NoFileProvided, ValidationError
from rental_api.uploads.validator import (
    INVALID_FILE_MESSAGE,
    MAX_FILE_SIZE,
    check_size,
    file_extension,
    require_file,
    validate_upload,
)


@pytest.mark.parametrize("content_type, filename", [
    ("image/jpeg", "car.jpg"),
    ("image/jpeg", "car.jpeg"),
    ("image/png", "car.png"),
    ("image/gif", "car.gif"),
    ("IMAGE/PNG", "CAR.PNG"),
    ("image/jpeg; charset=binary", "Front View.JPG"),
])
def test_accepts_allowed_images(content_type, filename):
    validate_upload(content_type, filename)


@pytest.mark.parametrize("content_type, filename", [
    ("text/plain", "notes.txt"),
    ("image/png", "notes.txt"),
    ("text/plain", "car.png"),
    ("image/webp", "car.webp"),
    ("image/png", "car"),
    (None, "car.png"),
])
def test_rejects_anything_else(content_type, filename):
    with pytest.raises(ValidationError) as excinfo:
        validate_upload(content_type, filename)
    assert excinfo.value.message == INVALID_FILE_MESSAGE


def test_file_extension_is_lowercased():
    assert file_extension("photo.Final.JPEG") == "jpeg"
    assert file_extension("no_extension") == ""


def test_size_limit():
    check_size(MAX_FILE_SIZE)
    with pytest.raises(FileTooLarge):
        check_size(MAX_FILE_SIZE + 1, "huge.png")


def test_too_large_is_a_validation_error():
    assert issubclass(FileTooLarge, ValidationError)


def test_missing_file_is_not_a_validation_error():
    with pytest.raises(NoFileProvided) as excinfo:
        require_file(None)
    assert not isinstance(excinfo.value, ValidationError)

    with pytest.raises(NoFileProvided):
        require_file(UploadFile(file=BytesIO(b""), filename=""))
