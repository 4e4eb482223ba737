from tfdoc_scraper.generator.hcl import generate_hcl
from tfdoc_scraper.scraper.base import ArgumentRecord, ProviderRecord, ResourceRecord

RECORD = ResourceRecord(
    name="aws_instance",
    description="Provides an EC2 instance resource.",
    args=(
        ArgumentRecord(name="ami", description="(Required) The AMI to use for the instance.", required=True),
        ArgumentRecord(name="tags", description="(Optional) A mapping of tags."),
        ArgumentRecord(
            name="root_block_device",
            description="(Required) Customize the root block device.",
            required=True,
            nested_fields=(
                ArgumentRecord(name="volume_type", description="(Optional) The type of volume."),
                ArgumentRecord(name="volume_size", description="(Required) The size of the volume.", required=True),
            ),
        ),
        ArgumentRecord(
            name="ephemeral_block_device",
            description="(Optional) Customize Ephemeral volumes.",
            nested_fields=(ArgumentRecord(name="device_name", required=True),),
        ),
    ),
)


class TestResourceHcl:
    def test_full_output(self):
        assert generate_hcl(RECORD) == (
            'resource "aws_instance" "example" {\n'
            "  # (Required) The AMI to use for the instance.\n"
            '  ami = ""\n'
            "  # (Optional) A mapping of tags.\n"
            '  tags = ""\n'
            "  # (Required) Customize the root block device.\n"
            "  root_block_device {\n"
            "    # (Optional) The type of volume.\n"
            '    volume_type = ""\n'
            "    # (Required) The size of the volume.\n"
            '    volume_size = ""\n'
            "  }\n"
            "  # (Optional) Customize Ephemeral volumes.\n"
            "  ephemeral_block_device {\n"
            '    device_name = ""\n'
            "  }\n"
            "}\n"
        )

    def test_required_only(self):
        output = generate_hcl(RECORD, required_only=True)
        assert 'ami = ""' in output
        assert "tags" not in output
        assert "root_block_device {" in output
        assert "volume_size" in output
        assert "volume_type" not in output
        assert "ephemeral_block_device" not in output

    def test_empty_resource(self):
        assert generate_hcl(ResourceRecord(name="aws_vpc")) == 'resource "aws_vpc" "example" {\n}\n'


class TestProviderHcl:
    def test_provider_lists_resources(self):
        record = ProviderRecord(name="aws", resource_names=("aws_instance", "aws_vpc"))
        assert generate_hcl(record) == 'provider "aws" {}\n\n# aws_instance\n# aws_vpc\n'
