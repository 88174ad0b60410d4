"""Reference dataset used by the ``demo`` command and the test suite."""

from socialgraph.audit.logger import AuditLogger
from socialgraph.config import NetworkConfig
from socialgraph.network import SocialNetwork

__all__ = ["SAMPLE_USERS", "SAMPLE_FRIENDSHIPS", "build_sample_network"]

SAMPLE_USERS: tuple[int, ...] = tuple(range(1, 9))

# Two components: {1, 2, 3, 4, 5} and {6, 7, 8}
SAMPLE_FRIENDSHIPS: tuple[tuple[int, int], ...] = (
    (1, 2),
    (1, 3),
    (2, 3),
    (2, 4),
    (3, 5),
    (6, 7),
    (7, 8),
)


def build_sample_network(
    config: NetworkConfig | None = None,
    audit_logger: AuditLogger | None = None,
) -> SocialNetwork:
    """Build the eight-user sample network.

    Parameters
    ----------
    config : NetworkConfig | None, optional
        Network configuration.
    audit_logger : AuditLogger | None, optional
        Event logger attached to the network.

    Returns
    -------
    SocialNetwork
        Network seeded with SAMPLE_USERS and SAMPLE_FRIENDSHIPS.
    """
    network = SocialNetwork(config=config, audit_logger=audit_logger)
    for user in SAMPLE_USERS:
        network.add_user(user)
    network.add_friendships(SAMPLE_FRIENDSHIPS)
    return network
