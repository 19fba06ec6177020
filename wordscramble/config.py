import os

PACKAGE_DIR = os.path.dirname(os.path.abspath(__file__))
RESOURCES_DIR = os.path.join(PACKAGE_DIR, 'resources')


class Config:
    # Newline-separated list of root words, one picked per game
    WORD_LIST_PATH = os.environ.get('WORD_LIST_PATH') or os.path.join(RESOURCES_DIR, 'start.txt')
    LOCALE = os.environ.get('LOCALE', 'en')
    # wordfreq Zipf score a word needs to count as real (3 is roughly once per million words)
    MIN_ZIPF = float(os.environ.get('MIN_ZIPF', '2.0'))
    CORS_ORIGINS = [o.strip() for o in os.environ.get('CORS_ORIGINS', '*').split(',') if o.strip()]
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')
