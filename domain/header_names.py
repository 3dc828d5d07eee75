# domain/header_names.py
ACCEPT = "Accept"
ACCEPT_CHARSET = "Accept-Charset"
ACCEPT_ENCODING = "Accept-Encoding"
ACCEPT_LANGUAGE = "Accept-Language"
AUTHORIZATION = "Authorization"
CONNECTION = "Connection"
CONTENT_LENGTH = "Content-Length"
CONTENT_TYPE = "Content-Type"
COOKIE = "Cookie"
DO_NOT_TRACK = "DNT"
HOST = "Host"
REFERER = "Referer"
USER_AGENT = "User-Agent"
