"""
Quiets third-party document libraries.

pypdf, python-docx and BeautifulSoup log (or warn) once per odd object in
a damaged file; none of it is actionable for the caller, who only sees
the parsed text or a FileOperationError.

Importing the module applies the settings; extractors import it for that
side effect.
"""
import logging
import warnings

_QUIET_LOGGERS = [
    'pypdf',
    'pdfminer',
    'PIL',
    'docx',
    'bs4',
]

for _logger_name in _QUIET_LOGGERS:
    logging.getLogger(_logger_name).setLevel(logging.ERROR)

# Malformed-but-readable PDFs emit a UserWarning per object
warnings.filterwarnings('ignore', category=UserWarning, module='pypdf')
