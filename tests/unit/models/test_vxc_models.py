"""Unit tests for VXC models and the partner configuration unions."""

import pytest
from pydantic import TypeAdapter, ValidationError

from megaport.models import (
    VXC,
    AWSConnection,
    AWSPartnerConfig,
    AzurePartnerConfig,
    GenericConnection,
    GenericPartnerConfig,
    GooglePartnerConfig,
    PartnerConfig,
    PartnerLookup,
    TransitPartnerConfig,
    VirtualRouterConnection,
    VRouterPartnerConfig,
    VXCOrderConfiguration,
    VXCOrderEndpoint,
)

partner_config = TypeAdapter(PartnerConfig)


class TestPartnerConfigUnion:
    """Tests for dispatch on connectType."""

    @pytest.mark.parametrize(
        "payload,expected",
        [
            ({"connectType": "AWS", "ownerAccount": "123"}, AWSPartnerConfig),
            ({"connectType": "AWSHC", "ownerAccount": "123"}, AWSPartnerConfig),
            ({"connectType": "AZURE", "serviceKey": "sk"}, AzurePartnerConfig),
            ({"connectType": "GOOGLE", "pairingKey": "pk"}, GooglePartnerConfig),
            ({"connectType": "TRANSIT"}, TransitPartnerConfig),
        ],
    )
    def test_dispatch(self, payload, expected):
        """Each connect type decodes into its own model."""
        assert isinstance(partner_config.validate_python(payload), expected)

    def test_interfaces_only_is_vrouter(self):
        """An A-end config with only interfaces is a VROUTER config."""
        config = partner_config.validate_python(
            {"interfaces": [{"ipAddresses": ["10.0.0.1/30"]}]}
        )
        assert isinstance(config, VRouterPartnerConfig)
        assert config.interfaces[0].ip_addresses == ["10.0.0.1/30"]

    def test_unknown_type_is_generic_and_keeps_fields(self):
        """Unmodelled connect types keep their extra fields."""
        config = partner_config.validate_python({"connectType": "NUTANIX", "foo": 1})
        assert isinstance(config, GenericPartnerConfig)
        assert config.model_extra == {"foo": 1}

    def test_aws_requires_owner_account(self):
        """Required fields of the selected variant are enforced."""
        with pytest.raises(ValidationError):
            partner_config.validate_python({"connectType": "AWS"})

    def test_serializes_with_connect_type(self):
        """The discriminator is part of the wire payload."""
        endpoint = VXCOrderEndpoint(
            product_uid="b-1", partner_config=AzurePartnerConfig(service_key="sk")
        )
        payload = endpoint.to_payload()
        assert payload["partnerConfig"] == {"connectType": "AZURE", "serviceKey": "sk", "peers": []}

    def test_aws_connection_name_alias(self):
        """The AWS connection name travels as ``name``."""
        config = AWSPartnerConfig(owner_account="1", connection_name="vif-1")
        assert config.to_payload()["name"] == "vif-1"


class TestVXCOrder:
    """Tests for VXC order bodies."""

    def test_a_end_defaults_empty(self):
        """Without an A-end the API uses the ordering port."""
        config = VXCOrderConfiguration(
            product_name="vxc",
            rate_limit=100,
            term=12,
            b_end=VXCOrderEndpoint(product_uid="b-1", vlan=10),
        )
        payload = config.to_payload()
        assert payload["aEnd"] == {}
        assert payload["bEnd"] == {"productUid": "b-1", "vlan": 10}

    def test_vnic_index_alias(self):
        """vnic_index uses the API's vNicIndex spelling."""
        assert VXCOrderEndpoint(vnic_index=1).to_payload() == {"vNicIndex": 1}


class TestVXCSnapshot:
    """Tests for decoding VXC snapshots."""

    def test_csp_connections_dispatch(self):
        """csp_connection entries decode by connect type."""
        vxc = VXC.model_validate(
            {
                "productUid": "v-1",
                "resources": {
                    "csp_connection": [
                        {"connectType": "AWS", "vif_id": "dxvif-1", "ownerAccount": "9"},
                        {"connectType": "VROUTER", "vlan": 5},
                        {"connectType": "SOMETHING_NEW", "x": 1},
                    ]
                },
            }
        )
        aws, vrouter, other = vxc.resources.csp_connection
        assert isinstance(aws, AWSConnection) and aws.vif_id == "dxvif-1"
        assert isinstance(vrouter, VirtualRouterConnection) and vrouter.vlan == 5
        assert isinstance(other, GenericConnection)

    def test_single_csp_connection_object(self):
        """A single object instead of a list is accepted."""
        vxc = VXC.model_validate(
            {"resources": {"csp_connection": {"connectType": "AZURE", "service_key": "k"}}}
        )
        assert len(vxc.resources.csp_connection) == 1

    def test_end_configuration(self):
        """A and B ends decode with VLANs."""
        vxc = VXC.model_validate(
            {
                "rateLimit": 500,
                "aEnd": {"productUid": "p-1", "vlan": 100, "innerVlan": 5},
                "bEnd": {"productUid": "p-2", "vlan": None},
            }
        )
        assert vxc.rate_limit == 500
        assert vxc.a_end.vlan == 100
        assert vxc.a_end.inner_vlan == 5
        assert vxc.b_end.vlan is None


class TestPartnerLookup:
    """Tests for partner port lookup decoding."""

    def test_megaports_decoded(self):
        """Lookup entries expose port speed and existing VXC."""
        lookup = PartnerLookup.model_validate(
            {
                "bandwidths": [50, 100],
                "megaports": [
                    {"port": 7, "productUid": "u-1", "portSpeed": 10000, "vxc": None}
                ],
                "service_key": "k",
            }
        )
        assert lookup.megaports[0].id == 7
        assert lookup.megaports[0].port_speed == 10000
        assert lookup.service_key == "k"
