"""Grant (or revoke) the admin claim out-of-band.

The setAdminClaim callable only accepts callers that are already admins,
so the first admin has to be created with service-account credentials:

    python set_admin.py <uid>
    python set_admin.py <uid> --revoke
"""
import argparse

from firebase_admin import auth

from vaqmas.core.config import get_settings
from vaqmas.core.firebase import get_db, init_firebase


def main():
    parser = argparse.ArgumentParser(description="Set the admin custom claim on a Firebase user")
    parser.add_argument("uid")
    parser.add_argument("--revoke", action="store_true", help="remove admin instead of granting it")
    args = parser.parse_args()

    init_firebase(get_settings())
    make_admin = not args.revoke

    user = auth.get_user(args.uid)
    claims = dict(user.custom_claims or {})
    claims["admin"] = make_admin
    auth.set_custom_user_claims(args.uid, claims)
    get_db().collection("users").document(args.uid).set({"isAdmin": make_admin}, merge=True)

    print(f"✅ admin={make_admin} set for UID: {args.uid}")
    print("✅ Now log out and log in again OR refresh token using getIdToken(true)")


if __name__ == "__main__":
    main()
