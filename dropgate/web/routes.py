CHECK = '/check'
CLASSIFY = '/classify'
UPLOAD = '/upload'
URL = '/url'
