"""
Vendor credential model.
"""
import os
from dataclasses import dataclass, field


@dataclass(frozen=True)
class VendorCredentials:
    """
    Credentials for one configured vendor connection.

    The secret is excluded from repr so credentials can appear in log lines.
    """
    account_id: str  # SanMar customer number / S&S account number
    username: str
    secret: str = field(repr=False)  # Password or API key

    @classmethod
    def from_env(cls, prefix: str) -> "VendorCredentials":
        """
        Build credentials from <PREFIX>_ACCOUNT_ID, <PREFIX>_USERNAME and <PREFIX>_SECRET.

        Args:
            prefix (str): Environment variable prefix, e.g. "SANMAR"

        Returns:
            VendorCredentials: The credentials (missing variables become empty strings)
        """
        prefix = prefix.upper()
        return cls(
            account_id=os.environ.get(f"{prefix}_ACCOUNT_ID", ""),
            username=os.environ.get(f"{prefix}_USERNAME", ""),
            secret=os.environ.get(f"{prefix}_SECRET", ""),
        )

    def masked(self) -> str:
        """
        Describe the credentials without exposing the secret.

        Returns:
            str: e.g. "account=12345 user=acme secret=***"
        """
        return f"account={self.account_id} user={self.username} secret={'***' if self.secret else ''}"
