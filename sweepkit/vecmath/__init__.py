"""Vector, matrix and quaternion types for 3D graphics."""