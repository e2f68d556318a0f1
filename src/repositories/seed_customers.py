"""Seed accounts loaded into the customer store at process start."""

SEED_CUSTOMERS = [
    {"id": "1", "name": "Acme Corporation", "domain": "acme.com", "mrr": 15000,
     "last_active": "2026-01-29T10:30:00Z", "health_score": 95,
     "owner": "Sarah Johnson", "avatar": "/avatars/acme.png"},
    {"id": "2", "name": "TechStart Inc", "domain": "techstart.io", "mrr": 8500,
     "last_active": "2026-01-28T15:45:00Z", "health_score": 72,
     "owner": "Michael Chen", "avatar": "/avatars/techstart.png"},
    {"id": "3", "name": "Global Solutions Ltd", "domain": "globalsolutions.com", "mrr": 25000,
     "last_active": "2026-01-15T08:20:00Z", "health_score": 35,
     "owner": "Sarah Johnson", "avatar": "/avatars/global.png"},
    {"id": "4", "name": "Innovation Labs", "domain": "innovationlabs.tech", "mrr": 12000,
     "last_active": "2026-01-29T14:15:00Z", "health_score": 88,
     "owner": "Emily Rodriguez", "avatar": "/avatars/innovation.png"},
    {"id": "5", "name": "Data Dynamics", "domain": "datadynamics.ai", "mrr": 18500,
     "last_active": "2026-01-27T11:00:00Z", "health_score": 65,
     "owner": "Michael Chen", "avatar": "/avatars/data.png"},
    {"id": "6", "name": "CloudBurst Systems", "domain": "cloudburst.io", "mrr": 9200,
     "last_active": "2026-01-10T09:30:00Z", "health_score": 28,
     "owner": "Emily Rodriguez", "avatar": "/avatars/cloud.png"},
    {"id": "7", "name": "NextGen Analytics", "domain": "nextgen-analytics.com", "mrr": 22000,
     "last_active": "2026-01-29T16:45:00Z", "health_score": 92,
     "owner": "Sarah Johnson", "avatar": "/avatars/nextgen.png"},
    {"id": "8", "name": "Velocity Software", "domain": "velocitysoft.dev", "mrr": 7800,
     "last_active": "2026-01-26T13:20:00Z", "health_score": 58,
     "owner": "Michael Chen", "avatar": "/avatars/velocity.png"},
    {"id": "9", "name": "Quantum Enterprises", "domain": "quantum-ent.com", "mrr": 31000,
     "last_active": "2026-01-29T09:15:00Z", "health_score": 97,
     "owner": "Emily Rodriguez", "avatar": "/avatars/quantum.png"},
    {"id": "10", "name": "Streamline Partners", "domain": "streamlinepartners.co", "mrr": 5500,
     "last_active": "2026-01-12T10:00:00Z", "health_score": 42,
     "owner": "Sarah Johnson", "avatar": "/avatars/streamline.png"},
    {"id": "11", "name": "Alpha Technologies", "domain": "alphatech.com", "mrr": 14500,
     "last_active": "2026-01-29T12:30:00Z", "health_score": 85,
     "owner": "Michael Chen", "avatar": "/avatars/alpha.png"},
    {"id": "12", "name": "Beta Innovations", "domain": "betainnovations.io", "mrr": 10200,
     "last_active": "2026-01-25T14:40:00Z", "health_score": 68,
     "owner": "Emily Rodriguez", "avatar": "/avatars/beta.png"},
    {"id": "13", "name": "Gamma Ventures", "domain": "gammaventures.com", "mrr": 19800,
     "last_active": "2026-01-08T08:15:00Z", "health_score": 22,
     "owner": "Sarah Johnson", "avatar": "/avatars/gamma.png"},
    {"id": "14", "name": "Delta Systems", "domain": "deltasystems.tech", "mrr": 27500,
     "last_active": "2026-01-29T11:20:00Z", "health_score": 94,
     "owner": "Michael Chen", "avatar": "/avatars/delta.png"},
    {"id": "15", "name": "Epsilon Digital", "domain": "epsilondigital.com", "mrr": 6700,
     "last_active": "2026-01-24T16:30:00Z", "health_score": 61,
     "owner": "Emily Rodriguez", "avatar": "/avatars/epsilon.png"},
    {"id": "16", "name": "Zenith Solutions", "domain": "zenithsolutions.co", "mrr": 13200,
     "last_active": "2026-01-14T12:45:00Z", "health_score": 38,
     "owner": "Sarah Johnson", "avatar": "/avatars/zenith.png"},
    {"id": "17", "name": "Phoenix Platform", "domain": "phoenixplatform.io", "mrr": 21500,
     "last_active": "2026-01-29T15:10:00Z", "health_score": 91,
     "owner": "Michael Chen", "avatar": "/avatars/phoenix.png"},
    {"id": "18", "name": "Nexus Networks", "domain": "nexusnetworks.com", "mrr": 8900,
     "last_active": "2026-01-27T09:25:00Z", "health_score": 74,
     "owner": "Emily Rodriguez", "avatar": "/avatars/nexus.png"},
    {"id": "19", "name": "Horizon Ventures", "domain": "horizonventures.ai", "mrr": 16800,
     "last_active": "2026-01-11T14:00:00Z", "health_score": 31,
     "owner": "Sarah Johnson", "avatar": "/avatars/horizon.png"},
    {"id": "20", "name": "Pinnacle Group", "domain": "pinnaclegroup.com", "mrr": 29000,
     "last_active": "2026-01-29T13:50:00Z", "health_score": 96,
     "owner": "Emily Rodriguez", "avatar": "/avatars/pinnacle.png"},
]
