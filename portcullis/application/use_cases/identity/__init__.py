"""Identity provisioning use cases."""

from portcullis.application.use_cases.identity.provision_identity import (
    IdentityProvisioningService,
)

__all__ = ["IdentityProvisioningService"]
