from fastapi import HTTPException, Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from typing import Optional
import jwt
from config import JWT_SECRET, JWT_ALGORITHM

# ----------------------
# Security Setup
# ----------------------
security = HTTPBearer(auto_error=False)

# ----------------------
# JWT Functions
# ----------------------

def verify_jwt_token(token: str) -> dict:
    """Verify and decode JWT token"""
    try:
        payload = jwt.decode(token, JWT_SECRET, algorithms=[JWT_ALGORITHM])
        return payload
    except jwt.ExpiredSignatureError:
        raise HTTPException(status_code=401, detail="Token has expired")
    except jwt.InvalidTokenError:
        raise HTTPException(status_code=401, detail="Invalid token")

# ----------------------
# Authentication Dependency
# ----------------------

def get_current_user_id(credentials: Optional[HTTPAuthorizationCredentials] = Depends(security)) -> str:
    """Dependency returning the authenticated citizen's user id"""
    if credentials is None:
        raise HTTPException(status_code=401, detail="Not authenticated")

    payload = verify_jwt_token(credentials.credentials)

    user_id = payload.get("userId")
    if not user_id:
        raise HTTPException(status_code=401, detail="Invalid token")

    return str(user_id)
