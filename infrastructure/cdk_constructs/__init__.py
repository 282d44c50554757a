"""CDK constructs for static website infrastructure."""

from .certificate import DnsValidatedCertificate
from .certificate_lookup import CertificateArnLookup
from .content import SiteContent
from .distribution import CloudFrontDistribution
from .dns import DnsRecords
from .edge import EdgeHandlers
from .static_site import StaticSiteConstruct
from .storage import RedirectBucket, StorageBucket

__all__ = [
  "CertificateArnLookup",
  "CloudFrontDistribution",
  "DnsRecords",
  "DnsValidatedCertificate",
  "EdgeHandlers",
  "RedirectBucket",
  "SiteContent",
  "StaticSiteConstruct",
  "StorageBucket",
]
