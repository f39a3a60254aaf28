"""Amazon SES v2 client.

REST-JSON service: client name ``SESv2``, signing name ``ses``, host
``email.{region}.amazonaws.com``.

Example:
    result = aws.sesv2.create_contact(
        ContactListName="newsletter", EmailAddress="someone@example.com"
    )
"""

from infrastructure.clients.aws.client import ServiceClient
from infrastructure.clients.aws.models import OperationModel
from infrastructure.clients.aws.serializers import ModelSerializer

OPERATIONS = (
    OperationModel("BatchGetMetricData", "POST", "/v2/email/metrics/batch"),
    OperationModel("CreateConfigurationSet", "POST", "/v2/email/configuration-sets"),
    OperationModel(
        "CreateConfigurationSetEventDestination",
        "POST",
        "/v2/email/configuration-sets/{ConfigurationSetName}/event-destinations",
        required=("ConfigurationSetName",),
    ),
    OperationModel(
        "CreateContact",
        "POST",
        "/v2/email/contact-lists/{ContactListName}/contacts",
        required=("ContactListName",),
    ),
    OperationModel("CreateContactList", "POST", "/v2/email/contact-lists"),
    OperationModel(
        "CreateCustomVerificationEmailTemplate",
        "POST",
        "/v2/email/custom-verification-email-templates",
    ),
    OperationModel("CreateDedicatedIpPool", "POST", "/v2/email/dedicated-ip-pools"),
    OperationModel(
        "CreateDeliverabilityTestReport",
        "POST",
        "/v2/email/deliverability-dashboard/test",
    ),
    OperationModel("CreateEmailIdentity", "POST", "/v2/email/identities"),
    OperationModel(
        "CreateEmailIdentityPolicy",
        "POST",
        "/v2/email/identities/{EmailIdentity}/policies/{PolicyName}",
        required=("EmailIdentity", "PolicyName"),
    ),
    OperationModel("CreateEmailTemplate", "POST", "/v2/email/templates"),
    OperationModel("CreateImportJob", "POST", "/v2/email/import-jobs"),
    OperationModel(
        "DeleteConfigurationSet",
        "DELETE",
        "/v2/email/configuration-sets/{ConfigurationSetName}",
        required=("ConfigurationSetName",),
    ),
    OperationModel(
        "DeleteConfigurationSetEventDestination",
        "DELETE",
        "/v2/email/configuration-sets/{ConfigurationSetName}/event-destinations/{EventDestinationName}",
        required=("ConfigurationSetName", "EventDestinationName"),
    ),
    OperationModel(
        "DeleteContact",
        "DELETE",
        "/v2/email/contact-lists/{ContactListName}/contacts/{EmailAddress}",
        required=("ContactListName", "EmailAddress"),
    ),
    OperationModel(
        "DeleteContactList",
        "DELETE",
        "/v2/email/contact-lists/{ContactListName}",
        required=("ContactListName",),
    ),
    OperationModel(
        "DeleteCustomVerificationEmailTemplate",
        "DELETE",
        "/v2/email/custom-verification-email-templates/{TemplateName}",
        required=("TemplateName",),
    ),
    OperationModel(
        "DeleteDedicatedIpPool",
        "DELETE",
        "/v2/email/dedicated-ip-pools/{PoolName}",
        required=("PoolName",),
    ),
    OperationModel(
        "DeleteEmailIdentity",
        "DELETE",
        "/v2/email/identities/{EmailIdentity}",
        required=("EmailIdentity",),
    ),
    OperationModel(
        "DeleteEmailIdentityPolicy",
        "DELETE",
        "/v2/email/identities/{EmailIdentity}/policies/{PolicyName}",
        required=("EmailIdentity", "PolicyName"),
    ),
    OperationModel(
        "DeleteEmailTemplate",
        "DELETE",
        "/v2/email/templates/{TemplateName}",
        required=("TemplateName",),
    ),
    OperationModel(
        "DeleteSuppressedDestination",
        "DELETE",
        "/v2/email/suppression/addresses/{EmailAddress}",
        required=("EmailAddress",),
    ),
    OperationModel("GetAccount", "GET", "/v2/email/account"),
    OperationModel(
        "GetBlacklistReports",
        "GET",
        "/v2/email/deliverability-dashboard/blacklist-report",
        required=("BlacklistItemNames",),
    ),
    OperationModel(
        "GetConfigurationSet",
        "GET",
        "/v2/email/configuration-sets/{ConfigurationSetName}",
        required=("ConfigurationSetName",),
    ),
    OperationModel(
        "GetConfigurationSetEventDestinations",
        "GET",
        "/v2/email/configuration-sets/{ConfigurationSetName}/event-destinations",
        required=("ConfigurationSetName",),
    ),
    OperationModel(
        "GetContact",
        "GET",
        "/v2/email/contact-lists/{ContactListName}/contacts/{EmailAddress}",
        required=("ContactListName", "EmailAddress"),
    ),
    OperationModel(
        "GetContactList",
        "GET",
        "/v2/email/contact-lists/{ContactListName}",
        required=("ContactListName",),
    ),
    OperationModel(
        "GetCustomVerificationEmailTemplate",
        "GET",
        "/v2/email/custom-verification-email-templates/{TemplateName}",
        required=("TemplateName",),
    ),
    OperationModel(
        "GetDedicatedIp", "GET", "/v2/email/dedicated-ips/{Ip}", required=("Ip",)
    ),
    OperationModel(
        "GetDedicatedIpPool",
        "GET",
        "/v2/email/dedicated-ip-pools/{PoolName}",
        required=("PoolName",),
    ),
    OperationModel("GetDedicatedIps", "GET", "/v2/email/dedicated-ips"),
    OperationModel(
        "GetDeliverabilityDashboardOptions", "GET", "/v2/email/deliverability-dashboard"
    ),
    OperationModel(
        "GetDeliverabilityTestReport",
        "GET",
        "/v2/email/deliverability-dashboard/test-reports/{ReportId}",
        required=("ReportId",),
    ),
    OperationModel(
        "GetDomainDeliverabilityCampaign",
        "GET",
        "/v2/email/deliverability-dashboard/campaigns/{CampaignId}",
        required=("CampaignId",),
    ),
    OperationModel(
        "GetDomainStatisticsReport",
        "GET",
        "/v2/email/deliverability-dashboard/statistics-report/{Domain}",
        required=("Domain", "StartDate", "EndDate"),
    ),
    OperationModel(
        "GetEmailIdentity",
        "GET",
        "/v2/email/identities/{EmailIdentity}",
        required=("EmailIdentity",),
    ),
    OperationModel(
        "GetEmailIdentityPolicies",
        "GET",
        "/v2/email/identities/{EmailIdentity}/policies",
        required=("EmailIdentity",),
    ),
    OperationModel(
        "GetEmailTemplate",
        "GET",
        "/v2/email/templates/{TemplateName}",
        required=("TemplateName",),
    ),
    OperationModel(
        "GetImportJob", "GET", "/v2/email/import-jobs/{JobId}", required=("JobId",)
    ),
    OperationModel(
        "GetSuppressedDestination",
        "GET",
        "/v2/email/suppression/addresses/{EmailAddress}",
        required=("EmailAddress",),
    ),
    OperationModel(
        "ListConfigurationSets", "POST", "/v2/email/list-configuration-sets"
    ),
    OperationModel("ListContactLists", "GET", "/v2/email/contact-lists"),
    OperationModel(
        "ListContacts",
        "POST",
        "/v2/email/contact-lists/{ContactListName}/contacts/list",
        required=("ContactListName",),
    ),
    OperationModel(
        "ListCustomVerificationEmailTemplates",
        "GET",
        "/v2/email/custom-verification-email-templates",
    ),
    OperationModel("ListDedicatedIpPools", "GET", "/v2/email/dedicated-ip-pools"),
    OperationModel(
        "ListDeliverabilityTestReports",
        "GET",
        "/v2/email/deliverability-dashboard/test-reports",
    ),
    OperationModel(
        "ListDomainDeliverabilityCampaigns",
        "GET",
        "/v2/email/deliverability-dashboard/domains/{SubscribedDomain}/campaigns",
        required=("StartDate", "EndDate", "SubscribedDomain"),
    ),
    OperationModel("ListEmailIdentities", "POST", "/v2/email/list-identities"),
    OperationModel("ListEmailTemplates", "GET", "/v2/email/templates"),
    OperationModel("ListImportJobs", "POST", "/v2/email/import-jobs/list"),
    OperationModel("ListRecommendations", "POST", "/v2/email/vdm/recommendations"),
    OperationModel(
        "ListSuppressedDestinations", "GET", "/v2/email/suppression/addresses"
    ),
    OperationModel(
        "ListTagsForResource", "GET", "/v2/email/tags", required=("ResourceArn",)
    ),
    OperationModel(
        "PutAccountDedicatedIpWarmupAttributes",
        "PUT",
        "/v2/email/account/dedicated-ips/warmup",
    ),
    OperationModel("PutAccountDetails", "POST", "/v2/email/account/details"),
    OperationModel("PutAccountSendingAttributes", "PUT", "/v2/email/account/sending"),
    OperationModel(
        "PutAccountSuppressionAttributes", "PUT", "/v2/email/account/suppression"
    ),
    OperationModel("PutAccountVdmAttributes", "PUT", "/v2/email/account/vdm"),
    OperationModel(
        "PutConfigurationSetDeliveryOptions",
        "PUT",
        "/v2/email/configuration-sets/{ConfigurationSetName}/delivery-options",
        required=("ConfigurationSetName",),
    ),
    OperationModel(
        "PutConfigurationSetReputationOptions",
        "PUT",
        "/v2/email/configuration-sets/{ConfigurationSetName}/reputation-options",
        required=("ConfigurationSetName",),
    ),
    OperationModel(
        "PutConfigurationSetSendingOptions",
        "PUT",
        "/v2/email/configuration-sets/{ConfigurationSetName}/sending",
        required=("ConfigurationSetName",),
    ),
    OperationModel(
        "PutConfigurationSetSuppressionOptions",
        "PUT",
        "/v2/email/configuration-sets/{ConfigurationSetName}/suppression-options",
        required=("ConfigurationSetName",),
    ),
    OperationModel(
        "PutConfigurationSetTrackingOptions",
        "PUT",
        "/v2/email/configuration-sets/{ConfigurationSetName}/tracking-options",
        required=("ConfigurationSetName",),
    ),
    OperationModel(
        "PutConfigurationSetVdmOptions",
        "PUT",
        "/v2/email/configuration-sets/{ConfigurationSetName}/vdm-options",
        required=("ConfigurationSetName",),
    ),
    OperationModel(
        "PutDedicatedIpInPool",
        "PUT",
        "/v2/email/dedicated-ips/{Ip}/pool",
        required=("Ip",),
    ),
    OperationModel(
        "PutDedicatedIpPoolScalingAttributes",
        "PUT",
        "/v2/email/dedicated-ip-pools/{PoolName}/scaling",
        required=("PoolName",),
    ),
    OperationModel(
        "PutDedicatedIpWarmupAttributes",
        "PUT",
        "/v2/email/dedicated-ips/{Ip}/warmup",
        required=("Ip",),
    ),
    OperationModel(
        "PutDeliverabilityDashboardOption", "PUT", "/v2/email/deliverability-dashboard"
    ),
    OperationModel(
        "PutEmailIdentityConfigurationSetAttributes",
        "PUT",
        "/v2/email/identities/{EmailIdentity}/configuration-set",
        required=("EmailIdentity",),
    ),
    OperationModel(
        "PutEmailIdentityDkimAttributes",
        "PUT",
        "/v2/email/identities/{EmailIdentity}/dkim",
        required=("EmailIdentity",),
    ),
    OperationModel(
        "PutEmailIdentityDkimSigningAttributes",
        "PUT",
        "/v2/email/identities/{EmailIdentity}/dkim/signing",
        required=("EmailIdentity",),
    ),
    OperationModel(
        "PutEmailIdentityFeedbackAttributes",
        "PUT",
        "/v2/email/identities/{EmailIdentity}/feedback",
        required=("EmailIdentity",),
    ),
    OperationModel(
        "PutEmailIdentityMailFromAttributes",
        "PUT",
        "/v2/email/identities/{EmailIdentity}/mail-from",
        required=("EmailIdentity",),
    ),
    OperationModel(
        "PutSuppressedDestination", "PUT", "/v2/email/suppression/addresses"
    ),
    OperationModel("SendBulkEmail", "POST", "/v2/email/outbound-bulk-emails"),
    OperationModel(
        "SendCustomVerificationEmail",
        "POST",
        "/v2/email/outbound-custom-verification-emails",
    ),
    OperationModel("SendEmail", "POST", "/v2/email/outbound-emails"),
    OperationModel("TagResource", "POST", "/v2/email/tags"),
    OperationModel(
        "TestRenderEmailTemplate",
        "POST",
        "/v2/email/templates/{TemplateName}/render",
        required=("TemplateName",),
    ),
    OperationModel(
        "UntagResource", "DELETE", "/v2/email/tags", required=("ResourceArn", "TagKeys")
    ),
    OperationModel(
        "UpdateConfigurationSetEventDestination",
        "PUT",
        "/v2/email/configuration-sets/{ConfigurationSetName}/event-destinations/{EventDestinationName}",
        required=("ConfigurationSetName", "EventDestinationName"),
    ),
    OperationModel(
        "UpdateContact",
        "PUT",
        "/v2/email/contact-lists/{ContactListName}/contacts/{EmailAddress}",
        required=("ContactListName", "EmailAddress"),
    ),
    OperationModel(
        "UpdateContactList",
        "PUT",
        "/v2/email/contact-lists/{ContactListName}",
        required=("ContactListName",),
    ),
    OperationModel(
        "UpdateCustomVerificationEmailTemplate",
        "PUT",
        "/v2/email/custom-verification-email-templates/{TemplateName}",
        required=("TemplateName",),
    ),
    OperationModel(
        "UpdateEmailIdentityPolicy",
        "PUT",
        "/v2/email/identities/{EmailIdentity}/policies/{PolicyName}",
        required=("EmailIdentity", "PolicyName"),
    ),
    OperationModel(
        "UpdateEmailTemplate",
        "PUT",
        "/v2/email/templates/{TemplateName}",
        required=("TemplateName",),
    ),
)


class SESV2Client(ServiceClient):
    """Client for Amazon Simple Email Service v2 operations."""

    SERVICE_NAME = "SESv2"
    SIGNING_NAME = "ses"
    ENDPOINT_PREFIX = "email"
    SERIALIZER = ModelSerializer("sesv2")
    OPERATIONS = OPERATIONS
