"""Channel provisioning use cases."""

from portcullis.application.use_cases.channels.provision_channel import (
    ChannelProvisioningService,
    build_welcome_message,
)

__all__ = ["ChannelProvisioningService", "build_welcome_message"]
