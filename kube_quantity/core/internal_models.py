from lightkube.models import core_v1

ResourceRequirements = core_v1.ResourceRequirements
