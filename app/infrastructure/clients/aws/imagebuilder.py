"""EC2 Image Builder client.

REST-JSON service: client name ``imagebuilder``, signing name
``imagebuilder``, host ``imagebuilder.{region}.amazonaws.com``.

Example:
    result = aws.imagebuilder.get_component(
        ComponentBuildVersionArn="arn:aws:imagebuilder:...:component/x/1.0.0/1"
    )
"""

from infrastructure.clients.aws.client import ServiceClient
from infrastructure.clients.aws.models import OperationModel
from infrastructure.clients.aws.serializers import ModelSerializer

OPERATIONS = (
    OperationModel("CancelImageCreation", "PUT", "/CancelImageCreation"),
    OperationModel("CreateComponent", "PUT", "/CreateComponent"),
    OperationModel("CreateContainerRecipe", "PUT", "/CreateContainerRecipe"),
    OperationModel(
        "CreateDistributionConfiguration", "PUT", "/CreateDistributionConfiguration"
    ),
    OperationModel("CreateImage", "PUT", "/CreateImage"),
    OperationModel("CreateImagePipeline", "PUT", "/CreateImagePipeline"),
    OperationModel("CreateImageRecipe", "PUT", "/CreateImageRecipe"),
    OperationModel(
        "CreateInfrastructureConfiguration", "PUT", "/CreateInfrastructureConfiguration"
    ),
    OperationModel(
        "DeleteComponent",
        "DELETE",
        "/DeleteComponent",
        required=("ComponentBuildVersionArn",),
    ),
    OperationModel(
        "DeleteContainerRecipe",
        "DELETE",
        "/DeleteContainerRecipe",
        required=("ContainerRecipeArn",),
    ),
    OperationModel(
        "DeleteDistributionConfiguration",
        "DELETE",
        "/DeleteDistributionConfiguration",
        required=("DistributionConfigurationArn",),
    ),
    OperationModel(
        "DeleteImage", "DELETE", "/DeleteImage", required=("ImageBuildVersionArn",)
    ),
    OperationModel(
        "DeleteImagePipeline",
        "DELETE",
        "/DeleteImagePipeline",
        required=("ImagePipelineArn",),
    ),
    OperationModel(
        "DeleteImageRecipe",
        "DELETE",
        "/DeleteImageRecipe",
        required=("ImageRecipeArn",),
    ),
    OperationModel(
        "DeleteInfrastructureConfiguration",
        "DELETE",
        "/DeleteInfrastructureConfiguration",
        required=("InfrastructureConfigurationArn",),
    ),
    OperationModel(
        "GetComponent", "GET", "/GetComponent", required=("ComponentBuildVersionArn",)
    ),
    OperationModel(
        "GetComponentPolicy", "GET", "/GetComponentPolicy", required=("ComponentArn",)
    ),
    OperationModel(
        "GetContainerRecipe",
        "GET",
        "/GetContainerRecipe",
        required=("ContainerRecipeArn",),
    ),
    OperationModel(
        "GetContainerRecipePolicy",
        "GET",
        "/GetContainerRecipePolicy",
        required=("ContainerRecipeArn",),
    ),
    OperationModel(
        "GetDistributionConfiguration",
        "GET",
        "/GetDistributionConfiguration",
        required=("DistributionConfigurationArn",),
    ),
    OperationModel("GetImage", "GET", "/GetImage", required=("ImageBuildVersionArn",)),
    OperationModel(
        "GetImagePipeline", "GET", "/GetImagePipeline", required=("ImagePipelineArn",)
    ),
    OperationModel("GetImagePolicy", "GET", "/GetImagePolicy", required=("ImageArn",)),
    OperationModel(
        "GetImageRecipe", "GET", "/GetImageRecipe", required=("ImageRecipeArn",)
    ),
    OperationModel(
        "GetImageRecipePolicy",
        "GET",
        "/GetImageRecipePolicy",
        required=("ImageRecipeArn",),
    ),
    OperationModel(
        "GetInfrastructureConfiguration",
        "GET",
        "/GetInfrastructureConfiguration",
        required=("InfrastructureConfigurationArn",),
    ),
    OperationModel(
        "GetWorkflowExecution",
        "GET",
        "/GetWorkflowExecution",
        required=("WorkflowExecutionId",),
    ),
    OperationModel(
        "GetWorkflowStepExecution",
        "GET",
        "/GetWorkflowStepExecution",
        required=("StepExecutionId",),
    ),
    OperationModel("ImportComponent", "PUT", "/ImportComponent"),
    OperationModel("ImportVmImage", "PUT", "/ImportVmImage"),
    OperationModel("ListComponentBuildVersions", "POST", "/ListComponentBuildVersions"),
    OperationModel("ListComponents", "POST", "/ListComponents"),
    OperationModel("ListContainerRecipes", "POST", "/ListContainerRecipes"),
    OperationModel(
        "ListDistributionConfigurations", "POST", "/ListDistributionConfigurations"
    ),
    OperationModel("ListImageBuildVersions", "POST", "/ListImageBuildVersions"),
    OperationModel("ListImagePackages", "POST", "/ListImagePackages"),
    OperationModel("ListImagePipelineImages", "POST", "/ListImagePipelineImages"),
    OperationModel("ListImagePipelines", "POST", "/ListImagePipelines"),
    OperationModel("ListImageRecipes", "POST", "/ListImageRecipes"),
    OperationModel(
        "ListImageScanFindingAggregations", "POST", "/ListImageScanFindingAggregations"
    ),
    OperationModel("ListImageScanFindings", "POST", "/ListImageScanFindings"),
    OperationModel("ListImages", "POST", "/ListImages"),
    OperationModel(
        "ListInfrastructureConfigurations", "POST", "/ListInfrastructureConfigurations"
    ),
    OperationModel(
        "ListTagsForResource", "GET", "/tags/{ResourceArn}", required=("ResourceArn",)
    ),
    OperationModel("ListWorkflowExecutions", "POST", "/ListWorkflowExecutions"),
    OperationModel("ListWorkflowStepExecutions", "POST", "/ListWorkflowStepExecutions"),
    OperationModel("PutComponentPolicy", "PUT", "/PutComponentPolicy"),
    OperationModel("PutContainerRecipePolicy", "PUT", "/PutContainerRecipePolicy"),
    OperationModel("PutImagePolicy", "PUT", "/PutImagePolicy"),
    OperationModel("PutImageRecipePolicy", "PUT", "/PutImageRecipePolicy"),
    OperationModel(
        "StartImagePipelineExecution", "PUT", "/StartImagePipelineExecution"
    ),
    OperationModel(
        "TagResource", "POST", "/tags/{ResourceArn}", required=("ResourceArn",)
    ),
    OperationModel(
        "UntagResource",
        "DELETE",
        "/tags/{ResourceArn}",
        required=("ResourceArn", "TagKeys"),
    ),
    OperationModel(
        "UpdateDistributionConfiguration", "PUT", "/UpdateDistributionConfiguration"
    ),
    OperationModel("UpdateImagePipeline", "PUT", "/UpdateImagePipeline"),
    OperationModel(
        "UpdateInfrastructureConfiguration", "PUT", "/UpdateInfrastructureConfiguration"
    ),
)


class ImagebuilderClient(ServiceClient):
    """Client for EC2 Image Builder operations."""

    SERVICE_NAME = "imagebuilder"
    SIGNING_NAME = "imagebuilder"
    ENDPOINT_PREFIX = "imagebuilder"
    SERIALIZER = ModelSerializer("imagebuilder")
    OPERATIONS = OPERATIONS
