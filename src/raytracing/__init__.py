"""CPU path tracer rendering spheres with diffuse Monte Carlo light transport.

This package renders a scene of geometric primitives into a raster image by
averaging many jittered camera rays per pixel, with support for:
- Recursive diffuse path tracing with a bounded bounce depth
- Extensible primitives through the Hittable interface (spheres included)
- A fixed pinhole camera
- Gamma-corrected PPM (P3) and PNG output

Subpackages:
    core: Vector algebra, rays, the integrator, image buffer and render loop
    geometry: Hit records, the Hittable interface and shape primitives
    scene: The World aggregate and ready-made scenes
    camera: Pinhole camera ray generation
    output: Tone mapping and image encoders
"""

__version__ = "0.1.0"
