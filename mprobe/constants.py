BASE_URL = "https://img.lermanga.org/S/{manga}/capitulo-{chapter}/{picture}.jpg"
PICTURE_EXTENSION = "jpg"
FIRST_CHAPTER = 0
FIRST_PAGE = 1
USER_AGENT = "mprobe/0.1.0"
