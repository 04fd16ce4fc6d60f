"""Tests for configuration resolution"""

import pytest

from staticsite import resolver
from staticsite.resolver import (
    DnsConfig,
    MissingDomainName,
    MissingHostedZone,
    PartialConfig,
    PartialDnsConfig,
    resolve,
)

EXPLICIT_DNS = PartialDnsConfig(domain_name="example.com", hosted_zone_id="Z123", subdomain="www")


class TestDefaults:
    def test_empty_config_uses_defaults(self):
        config = resolve(PartialConfig(), {})
        assert config.bucket_name == resolver.DEFAULT_BUCKET_NAME
        assert config.website_index_document == resolver.DEFAULT_WEBSITE_INDEX_DOCUMENT
        assert config.website_directory == resolver.DEFAULT_WEBSITE_DIRECTORY
        assert config.export_name == resolver.DEFAULT_EXPORT_NAME
        assert config.dns_config is None

    def test_empty_strings_use_defaults(self):
        raw = PartialConfig(
            bucket_name="",
            website_index_document="",
            website_directory="",
            export_name="",
        )
        config = resolve(raw, {})
        assert config.bucket_name == resolver.DEFAULT_BUCKET_NAME
        assert config.export_name == resolver.DEFAULT_EXPORT_NAME

    def test_caller_values_win(self):
        raw = PartialConfig(
            bucket_name="site.example.com",
            website_index_document="home.html",
            website_directory="public",
            export_name="SiteUrl",
        )
        config = resolve(raw, {})
        assert config.bucket_name == "site.example.com"
        assert config.website_index_document == "home.html"
        assert config.website_directory == "public"
        assert config.export_name == "SiteUrl"

    def test_unrelated_environment_ignored(self):
        assert resolve(PartialConfig(), {"HOME": "/root", "PATH": "/bin"}).dns_config is None


class TestExplicitDns:
    def test_used_verbatim(self):
        config = resolve(PartialConfig(route53_config=EXPLICIT_DNS), {})
        assert config.dns_config == DnsConfig("example.com", "Z123", "www")

    def test_environment_not_consulted(self):
        environ = {
            "ROUTE53_DOMAIN_NAME": "other.org",
            "ROUTE53_HOSTED_ZONE_ID": "ZENV",
            "ROUTE53_SUBDOMAIN": "env",
        }
        config = resolve(PartialConfig(route53_config=EXPLICIT_DNS), environ)
        assert config.dns_config == DnsConfig("example.com", "Z123", "www")

    def test_missing_subdomain_defaults(self):
        raw = PartialConfig(
            route53_config=PartialDnsConfig(domain_name="example.com", hosted_zone_id="Z123")
        )
        assert resolve(raw, {}).dns_config.subdomain == resolver.DEFAULT_SUBDOMAIN

    def test_empty_subdomain_selects_apex(self):
        raw = PartialConfig(
            route53_config=PartialDnsConfig(
                domain_name="example.com", hosted_zone_id="Z123", subdomain=""
            )
        )
        assert resolve(raw, {}).dns_config.subdomain == ""

    @pytest.mark.parametrize(
        "environ",
        [
            {},
            {"ROUTE53_HOSTED_ZONE_ID": "ZENV"},
            {"HOSTED_ZONE_ID": "ZENV"},
        ],
    )
    @pytest.mark.parametrize("hosted_zone_id", [None, ""])
    def test_missing_hosted_zone_fails(self, environ, hosted_zone_id):
        raw = PartialConfig(
            route53_config=PartialDnsConfig(domain_name="example.com", hosted_zone_id=hosted_zone_id)
        )
        with pytest.raises(MissingHostedZone):
            resolve(raw, environ)

    def test_missing_domain_name_fails(self):
        raw = PartialConfig(route53_config=PartialDnsConfig(hosted_zone_id="Z123"))
        with pytest.raises(MissingDomainName):
            resolve(raw, {})


class TestEnvironmentDns:
    def test_all_variables(self):
        environ = {
            "ROUTE53_DOMAIN_NAME": "example.org",
            "ROUTE53_HOSTED_ZONE_ID": "ZENV",
            "ROUTE53_SUBDOMAIN": "docs",
        }
        assert resolve(PartialConfig(), environ).dns_config == DnsConfig(
            "example.org", "ZENV", "docs"
        )

    def test_hosted_zone_only_uses_defaults(self):
        config = resolve(PartialConfig(), {"ROUTE53_HOSTED_ZONE_ID": "ZENV"})
        assert config.dns_config == DnsConfig(
            resolver.DEFAULT_DOMAIN_NAME, "ZENV", resolver.DEFAULT_SUBDOMAIN
        )

    def test_legacy_hosted_zone_variable(self):
        config = resolve(PartialConfig(), {"HOSTED_ZONE_ID": "ZLEGACY"})
        assert config.dns_config.hosted_zone_id == "ZLEGACY"

    def test_route53_hosted_zone_variable_wins(self):
        environ = {"ROUTE53_HOSTED_ZONE_ID": "ZNEW", "HOSTED_ZONE_ID": "ZLEGACY"}
        assert resolve(PartialConfig(), environ).dns_config.hosted_zone_id == "ZNEW"

    def test_empty_route53_hosted_zone_falls_back(self):
        environ = {"ROUTE53_HOSTED_ZONE_ID": "", "HOSTED_ZONE_ID": "ZLEGACY"}
        assert resolve(PartialConfig(), environ).dns_config.hosted_zone_id == "ZLEGACY"

    @pytest.mark.parametrize(
        "environ",
        [
            {"ROUTE53_DOMAIN_NAME": "example.org"},
            {"ROUTE53_SUBDOMAIN": "docs"},
        ],
    )
    def test_dns_variables_without_hosted_zone_fail(self, environ):
        with pytest.raises(MissingHostedZone) as excinfo:
            resolve(PartialConfig(), environ)
        assert "HOSTED_ZONE_ID" in str(excinfo.value)

    def test_empty_variables_disable_dns(self):
        environ = {"ROUTE53_DOMAIN_NAME": "", "ROUTE53_HOSTED_ZONE_ID": ""}
        assert resolve(PartialConfig(), environ).dns_config is None


class TestResolvedConfig:
    def test_is_immutable(self):
        config = resolve(PartialConfig(), {})
        with pytest.raises(AttributeError):
            config.bucket_name = "other"

    def test_missing_hosted_zone_is_config_error(self):
        assert issubclass(MissingHostedZone, resolver.ConfigError)
        assert issubclass(MissingDomainName, resolver.ConfigError)
