# Các hằng số mặc định của tầng bảo mật

# Time units (milliseconds)
MILLIS_PER_SECOND = 1000
MILLIS_PER_MINUTE = 60 * MILLIS_PER_SECOND

# Session
DEFAULT_GLOBAL_SESSION_TIMEOUT = 30 * MILLIS_PER_MINUTE
DEFAULT_SESSION_VALIDATION_INTERVAL = 30 * MILLIS_PER_SECOND
ACTIVE_SESSION_CACHE_NAME = "shiro-activeSessionCache"
DEFAULT_SESSION_DEQUE_CACHE_NAME = "shiro-sessionDequeCache"

# Caches
DEFAULT_AUTHORIZATION_CACHE_NAME = "shiro-authorizationCache"
DEFAULT_AUTHENTICATION_CACHE_NAME = "shiro-authenticationCache"
DEFAULT_CAPTCHA_CACHE_NAME = "shiro-captchaCache"

# Credentials retry
CREDENTIALS_RETRY_TIMES_LIMIT = 5
CREDENTIALS_RETRY_CACHE_NAME = "shiro-credentialsRetryCache"
DEFAULT_RETRY_TIMES_KEY_ATTRIBUTE_NAME = "shiroLoginFailureRetries"

# Captcha
DEFAULT_CAPTCHA_PARAM = "captcha"
DEFAULT_CAPTCHA_TIMEOUT = 60 * MILLIS_PER_SECOND
KAPTCHA_SESSION_KEY = "KAPTCHA_SESSION_KEY"
KAPTCHA_SESSION_DATE = "KAPTCHA_SESSION_DATE"

# URLs
DEFAULT_LOGIN_URL = "/login.jsp"
DEFAULT_SUCCESS_URL = "/"
DEFAULT_REDIRECT_URL = "/"

# Filter chains
ANON_CHAIN = "anon"
DEFAULT_IGNORED = ["/**/favicon.ico", "/assets/**", "/webjars/**"]
