"""Amazon Lightsail client.

JSON 1.1 RPC service: every operation is ``POST /`` with an
``X-Amz-Target: Lightsail_20161128.<Operation>`` header. Client name
``Lightsail``, signing name ``lightsail``.

Example:
    result = aws.lightsail.get_instance(instanceName="web-1")
"""

from infrastructure.clients.aws.client import ServiceClient
from infrastructure.clients.aws.models import OperationModel
from infrastructure.clients.aws.serializers import ModelSerializer

OPERATIONS = (
    OperationModel("AllocateStaticIp", "POST", "/"),
    OperationModel("AttachCertificateToDistribution", "POST", "/"),
    OperationModel("AttachDisk", "POST", "/"),
    OperationModel("AttachInstancesToLoadBalancer", "POST", "/"),
    OperationModel("AttachLoadBalancerTlsCertificate", "POST", "/"),
    OperationModel("AttachStaticIp", "POST", "/"),
    OperationModel("CloseInstancePublicPorts", "POST", "/"),
    OperationModel("CopySnapshot", "POST", "/"),
    OperationModel("CreateBucket", "POST", "/"),
    OperationModel("CreateBucketAccessKey", "POST", "/"),
    OperationModel("CreateCertificate", "POST", "/"),
    OperationModel("CreateCloudFormationStack", "POST", "/"),
    OperationModel("CreateContactMethod", "POST", "/"),
    OperationModel("CreateContainerService", "POST", "/"),
    OperationModel("CreateContainerServiceDeployment", "POST", "/"),
    OperationModel("CreateContainerServiceRegistryLogin", "POST", "/"),
    OperationModel("CreateDisk", "POST", "/"),
    OperationModel("CreateDiskFromSnapshot", "POST", "/"),
    OperationModel("CreateDiskSnapshot", "POST", "/"),
    OperationModel("CreateDistribution", "POST", "/"),
    OperationModel("CreateDomain", "POST", "/"),
    OperationModel("CreateDomainEntry", "POST", "/"),
    OperationModel("CreateGUISessionAccessDetails", "POST", "/"),
    OperationModel("CreateInstanceSnapshot", "POST", "/"),
    OperationModel("CreateInstances", "POST", "/"),
    OperationModel("CreateInstancesFromSnapshot", "POST", "/"),
    OperationModel("CreateKeyPair", "POST", "/"),
    OperationModel("CreateLoadBalancer", "POST", "/"),
    OperationModel("CreateLoadBalancerTlsCertificate", "POST", "/"),
    OperationModel("CreateRelationalDatabase", "POST", "/"),
    OperationModel("CreateRelationalDatabaseFromSnapshot", "POST", "/"),
    OperationModel("CreateRelationalDatabaseSnapshot", "POST", "/"),
    OperationModel("DeleteAlarm", "POST", "/"),
    OperationModel("DeleteAutoSnapshot", "POST", "/"),
    OperationModel("DeleteBucket", "POST", "/"),
    OperationModel("DeleteBucketAccessKey", "POST", "/"),
    OperationModel("DeleteCertificate", "POST", "/"),
    OperationModel("DeleteContactMethod", "POST", "/"),
    OperationModel("DeleteContainerImage", "POST", "/"),
    OperationModel("DeleteContainerService", "POST", "/"),
    OperationModel("DeleteDisk", "POST", "/"),
    OperationModel("DeleteDiskSnapshot", "POST", "/"),
    OperationModel("DeleteDistribution", "POST", "/"),
    OperationModel("DeleteDomain", "POST", "/"),
    OperationModel("DeleteDomainEntry", "POST", "/"),
    OperationModel("DeleteInstance", "POST", "/"),
    OperationModel("DeleteInstanceSnapshot", "POST", "/"),
    OperationModel("DeleteKeyPair", "POST", "/"),
    OperationModel("DeleteKnownHostKeys", "POST", "/"),
    OperationModel("DeleteLoadBalancer", "POST", "/"),
    OperationModel("DeleteLoadBalancerTlsCertificate", "POST", "/"),
    OperationModel("DeleteRelationalDatabase", "POST", "/"),
    OperationModel("DeleteRelationalDatabaseSnapshot", "POST", "/"),
    OperationModel("DetachCertificateFromDistribution", "POST", "/"),
    OperationModel("DetachDisk", "POST", "/"),
    OperationModel("DetachInstancesFromLoadBalancer", "POST", "/"),
    OperationModel("DetachStaticIp", "POST", "/"),
    OperationModel("DisableAddOn", "POST", "/"),
    OperationModel("DownloadDefaultKeyPair", "POST", "/"),
    OperationModel("EnableAddOn", "POST", "/"),
    OperationModel("ExportSnapshot", "POST", "/"),
    OperationModel("GetActiveNames", "POST", "/"),
    OperationModel("GetAlarms", "POST", "/"),
    OperationModel("GetAutoSnapshots", "POST", "/"),
    OperationModel("GetBlueprints", "POST", "/"),
    OperationModel("GetBucketAccessKeys", "POST", "/"),
    OperationModel("GetBucketBundles", "POST", "/"),
    OperationModel("GetBucketMetricData", "POST", "/"),
    OperationModel("GetBuckets", "POST", "/"),
    OperationModel("GetBundles", "POST", "/"),
    OperationModel("GetCertificates", "POST", "/"),
    OperationModel("GetCloudFormationStackRecords", "POST", "/"),
    OperationModel("GetContactMethods", "POST", "/"),
    OperationModel("GetContainerAPIMetadata", "POST", "/"),
    OperationModel("GetContainerImages", "POST", "/"),
    OperationModel("GetContainerLog", "POST", "/"),
    OperationModel("GetContainerServiceDeployments", "POST", "/"),
    OperationModel("GetContainerServiceMetricData", "POST", "/"),
    OperationModel("GetContainerServicePowers", "POST", "/"),
    OperationModel("GetContainerServices", "POST", "/"),
    OperationModel("GetCostEstimate", "POST", "/"),
    OperationModel("GetDisk", "POST", "/"),
    OperationModel("GetDiskSnapshot", "POST", "/"),
    OperationModel("GetDiskSnapshots", "POST", "/"),
    OperationModel("GetDisks", "POST", "/"),
    OperationModel("GetDistributionBundles", "POST", "/"),
    OperationModel("GetDistributionLatestCacheReset", "POST", "/"),
    OperationModel("GetDistributionMetricData", "POST", "/"),
    OperationModel("GetDistributions", "POST", "/"),
    OperationModel("GetDomain", "POST", "/"),
    OperationModel("GetDomains", "POST", "/"),
    OperationModel("GetExportSnapshotRecords", "POST", "/"),
    OperationModel("GetInstance", "POST", "/"),
    OperationModel("GetInstanceAccessDetails", "POST", "/"),
    OperationModel("GetInstanceMetricData", "POST", "/"),
    OperationModel("GetInstancePortStates", "POST", "/"),
    OperationModel("GetInstanceSnapshot", "POST", "/"),
    OperationModel("GetInstanceSnapshots", "POST", "/"),
    OperationModel("GetInstanceState", "POST", "/"),
    OperationModel("GetInstances", "POST", "/"),
    OperationModel("GetKeyPair", "POST", "/"),
    OperationModel("GetKeyPairs", "POST", "/"),
    OperationModel("GetLoadBalancer", "POST", "/"),
    OperationModel("GetLoadBalancerMetricData", "POST", "/"),
    OperationModel("GetLoadBalancerTlsCertificates", "POST", "/"),
    OperationModel("GetLoadBalancerTlsPolicies", "POST", "/"),
    OperationModel("GetLoadBalancers", "POST", "/"),
    OperationModel("GetOperation", "POST", "/"),
    OperationModel("GetOperations", "POST", "/"),
    OperationModel("GetOperationsForResource", "POST", "/"),
    OperationModel("GetRegions", "POST", "/"),
    OperationModel("GetRelationalDatabase", "POST", "/"),
    OperationModel("GetRelationalDatabaseBlueprints", "POST", "/"),
    OperationModel("GetRelationalDatabaseBundles", "POST", "/"),
    OperationModel("GetRelationalDatabaseEvents", "POST", "/"),
    OperationModel("GetRelationalDatabaseLogEvents", "POST", "/"),
    OperationModel("GetRelationalDatabaseLogStreams", "POST", "/"),
    OperationModel("GetRelationalDatabaseMasterUserPassword", "POST", "/"),
    OperationModel("GetRelationalDatabaseMetricData", "POST", "/"),
    OperationModel("GetRelationalDatabaseParameters", "POST", "/"),
    OperationModel("GetRelationalDatabaseSnapshot", "POST", "/"),
    OperationModel("GetRelationalDatabaseSnapshots", "POST", "/"),
    OperationModel("GetRelationalDatabases", "POST", "/"),
    OperationModel("GetStaticIp", "POST", "/"),
    OperationModel("GetStaticIps", "POST", "/"),
    OperationModel("ImportKeyPair", "POST", "/"),
    OperationModel("IsVpcPeered", "POST", "/"),
    OperationModel("OpenInstancePublicPorts", "POST", "/"),
    OperationModel("PeerVpc", "POST", "/"),
    OperationModel("PutAlarm", "POST", "/"),
    OperationModel("PutInstancePublicPorts", "POST", "/"),
    OperationModel("RebootInstance", "POST", "/"),
    OperationModel("RebootRelationalDatabase", "POST", "/"),
    OperationModel("RegisterContainerImage", "POST", "/"),
    OperationModel("ReleaseStaticIp", "POST", "/"),
    OperationModel("ResetDistributionCache", "POST", "/"),
    OperationModel("SendContactMethodVerification", "POST", "/"),
    OperationModel("SetIpAddressType", "POST", "/"),
    OperationModel("SetResourceAccessForBucket", "POST", "/"),
    OperationModel("StartGUISession", "POST", "/"),
    OperationModel("StartInstance", "POST", "/"),
    OperationModel("StartRelationalDatabase", "POST", "/"),
    OperationModel("StopGUISession", "POST", "/"),
    OperationModel("StopInstance", "POST", "/"),
    OperationModel("StopRelationalDatabase", "POST", "/"),
    OperationModel("TagResource", "POST", "/"),
    OperationModel("TestAlarm", "POST", "/"),
    OperationModel("UnpeerVpc", "POST", "/"),
    OperationModel("UntagResource", "POST", "/"),
    OperationModel("UpdateBucket", "POST", "/"),
    OperationModel("UpdateBucketBundle", "POST", "/"),
    OperationModel("UpdateContainerService", "POST", "/"),
    OperationModel("UpdateDistribution", "POST", "/"),
    OperationModel("UpdateDistributionBundle", "POST", "/"),
    OperationModel("UpdateDomainEntry", "POST", "/"),
    OperationModel("UpdateInstanceMetadataOptions", "POST", "/"),
    OperationModel("UpdateLoadBalancerAttribute", "POST", "/"),
    OperationModel("UpdateRelationalDatabase", "POST", "/"),
    OperationModel("UpdateRelationalDatabaseParameters", "POST", "/"),
)


class LightsailClient(ServiceClient):
    SERVICE_NAME = "Lightsail"
    SIGNING_NAME = "lightsail"
    ENDPOINT_PREFIX = "lightsail"
    SERIALIZER = ModelSerializer("lightsail")
    OPERATIONS = OPERATIONS
