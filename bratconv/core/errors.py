ERR_NO_ENTITIES = (
    "the conf file does not have an `[entities]` field or `[entities]` field is empty"
)
ERR_MULTIPLE_CONF_FILES = "multiple `annotation.conf` files found"
ERR_DISCONTINUOUS_NOT_SUPPORTED = (
    "discontinuous text-bound annotations is not currently supported"
)

ERR_SUBSTR_NEGATIVE_START = (
    "start position should be a positive number, Received start position {start}"
)
ERR_SUBSTR_END_BEFORE_START = (
    "end position should be greater than start position, Received end position {end}"
)
ERR_SUBSTR_END_AFTER_DATA = (
    "end position should be lesser than length of the txt data, "
    "Length of txt data: {length}, End position: {end}"
)

ERR_FILE_NOT_EXIST = "{path} file does not exist"
ERR_TXT_ANN_BAD_FORMAT = "text annotation is badly formatted"
ERR_BAD_FORMAT = "file follows unknown format: "
ERR_BAD_FORMAT_TAB = "file follows unknown format: expected 3 properties separated by [tab]"
ERR_OUTPUT_EXISTS = (
    "the output file already exists use `--force` or `-f` flag to overwrite the file"
)


class ConversionError(Exception):
    """Base class for everything that aborts a conversion run."""


class ConfigurationError(ConversionError):
    """annotation.conf is missing, unreadable or declares no entities; bad inputs."""


class UnsupportedFeature(ConversionError):
    """The annotation uses a BRAT feature this converter does not handle."""


class FormatError(ConversionError):
    """A .ann record does not follow the expected grammar."""


class RangeError(ConversionError):
    """An offset range falls outside the document text."""


class ResourceError(ConversionError):
    """Missing paired file, refused overwrite or an I/O failure."""
