"""
Firebase Admin SDK authentication provider.

Verifies Firebase ID tokens issued to the admin console. Requires the
firebase-admin package and a service account (file path, inline dict, or
application default credentials).

Example:
    auth = FirebaseAuth(credentials_path="path/to/serviceAccount.json")

    claims = await auth.verify_token(id_token)
    print(claims["uid"])  # Firebase user ID
"""

import logging
from typing import Dict, Any, Optional

from fastapi.concurrency import run_in_threadpool

import firebase_admin
from firebase_admin import auth, credentials

from common.auth.base import AuthProvider

logger = logging.getLogger(__name__)


def get_firebase_app(
    credentials_path: Optional[str] = None,
    credentials_dict: Optional[Dict[str, Any]] = None,
    project_id: Optional[str] = None,
) -> firebase_admin.App:
    """
    Return the default Firebase app, initializing it on first use.

    Credentials are resolved in order: explicit file path, inline
    service-account dict, then application default credentials.
    """
    if firebase_admin._apps:
        return firebase_admin.get_app()

    if credentials_path:
        cred = credentials.Certificate(credentials_path)
    elif credentials_dict:
        cred = credentials.Certificate(credentials_dict)
    else:
        # GCP environments (Cloud Run, GKE) provide these
        cred = credentials.ApplicationDefault()

    options = {}
    if project_id:
        options["projectId"] = project_id

    logger.info("Initializing Firebase Admin app")
    return firebase_admin.initialize_app(cred, options)


class FirebaseAuth(AuthProvider):
    """
    Firebase Admin SDK authentication provider.

    Token issuance, revocation and account management stay with Firebase;
    this side only verifies tokens.
    """

    def __init__(
        self,
        app: Optional[firebase_admin.App] = None,
        credentials_path: Optional[str] = None,
        credentials_dict: Optional[Dict[str, Any]] = None,
        project_id: Optional[str] = None,
        check_revoked: bool = False,
    ):
        """
        Initialize Firebase auth provider.

        Args:
            app: Already-initialized Firebase app (takes precedence)
            credentials_path: Path to service account JSON file
            credentials_dict: Service account credentials as dict
            project_id: Firebase project ID (optional, inferred from credentials)
            check_revoked: Also reject tokens whose session was revoked
        """
        self._app = app or get_firebase_app(
            credentials_path=credentials_path,
            credentials_dict=credentials_dict,
            project_id=project_id,
        )
        self._check_revoked = check_revoked
        self._auth = auth

    async def verify_token(self, token: str) -> Dict[str, Any]:
        """
        Verify a Firebase ID token.

        Rejected tokens raise ValueError. Anything else (certificate fetch,
        transport, user lookup) propagates unchanged so callers can report
        it as a server fault rather than as bad credentials.
        """
        try:
            # Blocking SDK call; it may fetch Google's public certs
            decoded = await run_in_threadpool(
                self._auth.verify_id_token,
                token,
                app=self._app,
                check_revoked=self._check_revoked,
            )
        except self._auth.RevokedIdTokenError:
            raise ValueError("Token has been revoked")
        except self._auth.ExpiredIdTokenError:
            raise ValueError("Token has expired")
        except self._auth.UserDisabledError:
            raise ValueError("User account is disabled")
        except self._auth.InvalidIdTokenError as e:
            raise ValueError(f"Invalid token: {e}")

        # Add 'sub' field so callers can read either claim
        decoded["sub"] = decoded.get("uid")
        return decoded
