"""
authconf - Property keys and scan ceilings.

Scalar keys are used as-is (``anonymous``, ``facebook.id``). Indexed keys
are suffixed with ``.<index>`` (``cas.loginUrl.0``, ``cas.loginUrl.1``).
Each category has its own inclusive ceiling.
"""

# ============================================================================
# Scan ceilings (inclusive)
# ============================================================================

MAX_NUM_AUTHENTICATORS = 10
MAX_NUM_CLIENTS = 100
MAX_NUM_ENCODERS = 10
MAX_NUM_CUSTOM_PROPERTIES = 5

# ============================================================================
# Built-in authenticator names
# ============================================================================

AUTHENTICATOR_TEST_TOKEN = "testToken"
AUTHENTICATOR_TEST_USERNAME_PASSWORD = "testUsernamePassword"

# ============================================================================
# Password encoders
# ============================================================================

CRYPT_ENCODER = "crypt.encoder"
CRYPT_ENCODER_TYPE = "crypt.encoder.type"
CRYPT_ENCODER_BCRYPT_ROUNDS = "crypt.encoder.bcrypt.rounds"
CRYPT_ENCODER_PBKDF2_ROUNDS = "crypt.encoder.pbkdf2.rounds"
CRYPT_ENCODER_PBKDF2_SALT_SIZE = "crypt.encoder.pbkdf2.saltSize"
CRYPT_ENCODER_SCRYPT_ROUNDS = "crypt.encoder.scrypt.rounds"
CRYPT_ENCODER_SCRYPT_BLOCK_SIZE = "crypt.encoder.scrypt.blockSize"
CRYPT_ENCODER_SCRYPT_PARALLELISM = "crypt.encoder.scrypt.parallelism"
CRYPT_ENCODER_STANDARD_ROUNDS = "crypt.encoder.standard.rounds"
CRYPT_ENCODER_ARGON2_TIME_COST = "crypt.encoder.argon2.timeCost"
CRYPT_ENCODER_ARGON2_MEMORY_COST = "crypt.encoder.argon2.memoryCost"
CRYPT_ENCODER_ARGON2_PARALLELISM = "crypt.encoder.argon2.parallelism"

DIGEST_ENCODER = "digest.encoder"
DIGEST_ENCODER_GENERATE_PUBLIC_SALT = "digest.encoder.generatePublicSalt"
DIGEST_ENCODER_HASH_ALGORITHM_NAME = "digest.encoder.hashAlgorithmName"
DIGEST_ENCODER_HASH_ITERATIONS = "digest.encoder.hashIterations"
DIGEST_ENCODER_PRIVATE_SALT = "digest.encoder.privateSalt"

# ============================================================================
# LDAP authenticator
# ============================================================================

LDAP = "ldap"
LDAP_TYPE = "ldap.type"
LDAP_URL = "ldap.ldapUrl"
LDAP_USERS_DN = "ldap.usersDn"
LDAP_DN_FORMAT = "ldap.dnFormat"
LDAP_PRINCIPAL_ATTRIBUTE_ID = "ldap.principalAttributeId"
LDAP_PRINCIPAL_ATTRIBUTE_PASSWORD = "ldap.principalAttributePassword"
LDAP_PRINCIPAL_ATTRIBUTES = "ldap.principalAttributes"
LDAP_SUBTREE_SEARCH = "ldap.subtreeSearch"
LDAP_BIND_DN = "ldap.bindDn"
LDAP_BIND_CREDENTIAL = "ldap.bindCredential"
LDAP_CONNECT_TIMEOUT = "ldap.connectTimeout"
LDAP_RESPONSE_TIMEOUT = "ldap.responseTimeout"
LDAP_USE_START_TLS = "ldap.useStartTls"
LDAP_MIN_POOL_SIZE = "ldap.minPoolSize"
LDAP_MAX_POOL_SIZE = "ldap.maxPoolSize"

# ============================================================================
# Database authenticator
# ============================================================================

DB = "db"
DB_DATASOURCE_CLASS_NAME = "db.dataSourceClassName"
DB_JDBC_URL = "db.jdbcUrl"
DB_USERNAME = "db.username"
DB_PASSWORD = "db.password"
DB_USERS_TABLE = "db.usersTable"
DB_ATTRIBUTES = "db.attributes"
DB_USER_ID_ATTRIBUTE = "db.userIdAttribute"
DB_USERNAME_ATTRIBUTE = "db.usernameAttribute"
DB_USER_PASSWORD_ATTRIBUTE = "db.userPasswordAttribute"
DB_PASSWORD_ENCODER = "db.passwordEncoder"
DB_AUTO_COMMIT = "db.autoCommit"
DB_READ_ONLY = "db.readOnly"
DB_POOL_NAME = "db.poolName"
DB_MINIMUM_IDLE = "db.minimumIdle"
DB_MAXIMUM_POOL_SIZE = "db.maximumPoolSize"
DB_CONNECTION_TIMEOUT = "db.connectionTimeout"
DB_IDLE_TIMEOUT = "db.idleTimeout"
DB_MAX_LIFETIME = "db.maxLifetime"
DB_CONNECTION_TEST_QUERY = "db.connectionTestQuery"
DB_CUSTOM_PARAM_NAME = "db.customParamName"
DB_CUSTOM_PARAM_VALUE = "db.customParamValue"

# ============================================================================
# OAuth providers (scalar keys)
# ============================================================================

FACEBOOK_ID = "facebook.id"
FACEBOOK_SECRET = "facebook.secret"
FACEBOOK_SCOPE = "facebook.scope"
FACEBOOK_FIELDS = "facebook.fields"

TWITTER_ID = "twitter.id"
TWITTER_SECRET = "twitter.secret"
TWITTER_INCLUDE_EMAIL = "twitter.includeEmail"

DROPBOX_ID = "dropbox.id"
DROPBOX_SECRET = "dropbox.secret"

GITHUB_ID = "github.id"
GITHUB_SECRET = "github.secret"
GITHUB_SCOPE = "github.scope"

YAHOO_ID = "yahoo.id"
YAHOO_SECRET = "yahoo.secret"

GOOGLE_ID = "google.id"
GOOGLE_SECRET = "google.secret"
GOOGLE_SCOPE = "google.scope"

FOURSQUARE_ID = "foursquare.id"
FOURSQUARE_SECRET = "foursquare.secret"

WINDOWSLIVE_ID = "windowslive.id"
WINDOWSLIVE_SECRET = "windowslive.secret"

LINKEDIN_ID = "linkedin.id"
LINKEDIN_SECRET = "linkedin.secret"
LINKEDIN_SCOPE = "linkedin.scope"

OAUTH2_ID = "oauth2.id"
OAUTH2_SECRET = "oauth2.secret"
OAUTH2_AUTH_URL = "oauth2.authUrl"
OAUTH2_TOKEN_URL = "oauth2.tokenUrl"
OAUTH2_PROFILE_URL = "oauth2.profileUrl"
OAUTH2_PROFILE_PATH = "oauth2.profilePath"
OAUTH2_PROFILE_ID = "oauth2.profileId"
OAUTH2_SCOPE = "oauth2.scope"
OAUTH2_WITH_STATE = "oauth2.withState"
OAUTH2_CLIENT_AUTHENTICATION_METHOD = "oauth2.clientAuthenticationMethod"
OAUTH2_PROFILE_VERB = "oauth2.profileVerb"
OAUTH2_PROFILE_ATTRS = "oauth2.profileAttrs"
OAUTH2_CUSTOM_PARAMS = "oauth2.customParams"

# Providers checked by OAuth detection: (name, id key, secret key)
OAUTH_PROVIDERS = (
    ("linkedin", LINKEDIN_ID, LINKEDIN_SECRET),
    ("facebook", FACEBOOK_ID, FACEBOOK_SECRET),
    ("windowslive", WINDOWSLIVE_ID, WINDOWSLIVE_SECRET),
    ("foursquare", FOURSQUARE_ID, FOURSQUARE_SECRET),
    ("google", GOOGLE_ID, GOOGLE_SECRET),
    ("yahoo", YAHOO_ID, YAHOO_SECRET),
    ("dropbox", DROPBOX_ID, DROPBOX_SECRET),
    ("github", GITHUB_ID, GITHUB_SECRET),
    ("twitter", TWITTER_ID, TWITTER_SECRET),
)

# ============================================================================
# SAML 2
# ============================================================================

SAML_KEYSTORE_PASSWORD = "saml.keystorePassword"
SAML_PRIVATE_KEY_PASSWORD = "saml.privateKeyPassword"
SAML_KEYSTORE_PATH = "saml.keystorePath"
SAML_KEYSTORE_ALIAS = "saml.keystoreAlias"
SAML_IDENTITY_PROVIDER_METADATA_PATH = "saml.identityProviderMetadataPath"
SAML_SERVICE_PROVIDER_ENTITY_ID = "saml.serviceProviderEntityId"
SAML_SERVICE_PROVIDER_METADATA_PATH = "saml.serviceProviderMetadataPath"
SAML_MAXIMUM_AUTHENTICATION_LIFETIME = "saml.maximumAuthenticationLifetime"
SAML_AUTHN_REQUEST_BINDING_TYPE = "saml.authnRequestBindingType"
SAML_RESPONSE_BINDING_TYPE = "saml.responseBindingType"
SAML_LOGOUT_REQUEST_BINDING_TYPE = "saml.logoutRequestBindingType"
SAML_FORCE_AUTH = "saml.forceAuth"
SAML_PASSIVE = "saml.passive"
SAML_WANTS_ASSERTIONS_SIGNED = "saml.wantsAssertionsSigned"
SAML_AUTHN_REQUEST_SIGNED = "saml.authnRequestSigned"
SAML_NAME_ID_POLICY_FORMAT = "saml.nameIdPolicyFormat"
SAML_ATTRIBUTE_AS_ID = "saml.attributeAsId"

# ============================================================================
# CAS
# ============================================================================

CAS_LOGIN_URL = "cas.loginUrl"
CAS_PROTOCOL = "cas.protocol"

# ============================================================================
# OpenID Connect
# ============================================================================

OIDC_TYPE = "oidc.type"
OIDC_ID = "oidc.id"
OIDC_SECRET = "oidc.secret"
OIDC_DISCOVERY_URI = "oidc.discoveryUri"
OIDC_USE_NONCE = "oidc.useNonce"
OIDC_PREFERRED_JWS_ALGORITHM = "oidc.preferredJwsAlgorithm"
OIDC_MAX_CLOCK_SKEW = "oidc.maxClockSkew"
OIDC_CLIENT_AUTHENTICATION_METHOD = "oidc.clientAuthenticationMethod"
OIDC_SCOPE = "oidc.scope"
OIDC_RESPONSE_TYPE = "oidc.responseType"
OIDC_RESPONSE_MODE = "oidc.responseMode"
OIDC_LOGOUT_URL = "oidc.logoutUrl"
OIDC_CUSTOM_PARAM_KEY = "oidc.customParamKey"
OIDC_CUSTOM_PARAM_VALUE = "oidc.customParamValue"
OIDC_AZURE_TENANT = "oidc.azure.tenant"
OIDC_KEYCLOAK_REALM = "oidc.keycloak.realm"
OIDC_KEYCLOAK_BASE_URI = "oidc.keycloak.baseUri"

# ============================================================================
# HTTP authenticators and clients
# ============================================================================

ANONYMOUS = "anonymous"

REST_URL = "rest.url"

FORMCLIENT_LOGIN_URL = "formClient.loginUrl"
FORMCLIENT_AUTHENTICATOR = "formClient.authenticator"
FORMCLIENT_USERNAME_PARAMETER = "formClient.usernameParameter"
FORMCLIENT_PASSWORD_PARAMETER = "formClient.passwordParameter"

INDIRECTBASICAUTH_AUTHENTICATOR = "indirectBasicAuth.authenticator"
INDIRECTBASICAUTH_REALM_NAME = "indirectBasicAuth.realmName"

DIRECTBASICAUTH_AUTHENTICATOR = "directBasicAuth.authenticator"
