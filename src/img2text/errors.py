class ConversionError(ValueError):
    """Base class for everything that stops an image from being converted."""

    message = "Conversion failed."

    def __init__(self, message: str | None = None):
        super().__init__(message or self.message)


class MissingArgument(ConversionError):
    message = "No Image File Path Given."


class ImagePathInvalid(ConversionError):
    message = "Image Path is Invalid."


class ImageTypeIdentificationFailed(ConversionError):
    message = "Image Type Identification Failed."


class UnsupportedImageType(ConversionError):
    message = "Unsupported Image Type."


class DecodeFailure(ConversionError):
    message = "Image could not be decoded."


class IncompletePixelData(ConversionError):
    message = "Pixel Data is incomplete."


class InvalidDimensions(ConversionError):
    message = "Image dimensions must be positive."
