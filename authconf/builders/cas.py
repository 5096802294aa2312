"""
CAS client builder.
"""

from __future__ import annotations

import logging

from ..clients import CasClient, CasProtocol, Client
from ..constants import CAS_LOGIN_URL, CAS_PROTOCOL, MAX_NUM_CLIENTS
from ..properties import indexed_key
from .base import AbstractBuilder

logger = logging.getLogger("authconf.builders.cas")


class CasClientBuilder(AbstractBuilder):

    def try_create_cas_client(self, clients: list[Client]) -> None:
        for i in range(MAX_NUM_CLIENTS + 1):
            login_url = self.properties.get_str(CAS_LOGIN_URL, i)
            if login_url is None:
                continue
            client = CasClient(
                name=indexed_key("cas", i),
                login_url=login_url,
                protocol=self.choice(CAS_PROTOCOL, i, CasProtocol, default=CasProtocol.CAS30),
            )
            logger.debug("Built CAS client %s (%s)", client.name, client.protocol.value)
            clients.append(client)
