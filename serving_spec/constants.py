"""
Well-known Knative label and annotation keys, and the type metadata used for
exported objects.
"""

SERVING_API_VERSION = "serving.knative.dev/v1"
SERVING_GROUP = "serving.knative.dev"

# Labels set by the serving controller
SERVICE_LABEL_KEY = "serving.knative.dev/service"
CONFIGURATION_GENERATION_LABEL_KEY = "serving.knative.dev/configurationGeneration"
CONFIGURATION_UID_LABEL_KEY = "serving.knative.dev/configurationUID"
SERVICE_UID_LABEL_KEY = "serving.knative.dev/serviceUID"

# Annotations set by the serving webhook and controller
CREATOR_ANNOTATION_KEY = "serving.knative.dev/creator"
LAST_MODIFIER_ANNOTATION_KEY = "serving.knative.dev/lastModifier"
LAST_PINNED_ANNOTATION_KEY = "serving.knative.dev/lastPinned"
ROUTING_STATE_MODIFIED_ANNOTATION_KEY = "serving.knative.dev/routingStateModified"
LAST_APPLIED_CONFIGURATION_ANNOTATION_KEY = "kubectl.kubernetes.io/last-applied-configuration"

# Set by kn on every template change
UPDATE_TIMESTAMP_ANNOTATION_KEY = "client.knative.dev/updateTimestamp"

EXPORT_API_VERSION = "client.knative.dev/v1alpha1"
EXPORT_KIND = "Export"

LIST_API_VERSION = "v1"
LIST_KIND = "List"
